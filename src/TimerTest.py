#####################################################################
# -*- coding: utf-8 -*-                                             #
#                                                                   #
# Frets on Fire                                                     #
# Copyright (C) 2006 Sami Kyöstilä                                  #
# Python 3 Port (2026)                                              #
#                                                                   #
# This program is free software; you can redistribute it and/or     #
# modify it under the terms of the GNU General Public License       #
# as published by the Free Software Foundation; either version 2    #
# of the License, or (at your option) any later version.            #
#                                                                   #
# This program is distributed in the hope that it will be useful,   #
# but WITHOUT ANY WARRANTY; without even the implied warranty of    #
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the     #
# GNU General Public License for more details.                      #
#                                                                   #
# You should have received a copy of the GNU General Public License #
# along with this program; if not, write to the Free Software       #
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston,        #
# MA  02110-1301, USA.                                              #
#####################################################################

import unittest

from Timer import Timer


class ManualClock:
  def __init__(self, time = 100.0):
    self.time = time

  def __call__(self):
    return self.time


class TimerTest(unittest.TestCase):
  def setUp(self):
    self.clock = ManualClock()
    self.timer = Timer(fps = 60, clock = self.clock)
    self.timer.highPriority = True

  def testTimeStartsAtZero(self):
    self.assertEqual(self.timer.time, 0.0)
    self.clock.time = 100.5
    self.assertAlmostEqual(self.timer.time, 0.5)

  def testTickrateScalesTime(self):
    timer = Timer(fps = 60, tickrate = 2.0, clock = self.clock)
    self.clock.time = 100.5
    self.assertAlmostEqual(timer.getTime(), 1.0)

  def testAdvanceFrame(self):
    self.clock.time = 100.1
    ticks = self.timer.advanceFrame()
    self.assertEqual(len(ticks), 1)
    self.assertAlmostEqual(ticks[0], 0.1)
    self.assertEqual(self.timer.frame, 1)

    self.clock.time = 100.125
    self.assertAlmostEqual(self.timer.advanceFrame()[0], 0.025)
    self.assertEqual(self.timer.frame, 2)

  def testLongStallIsCapped(self):
    self.clock.time = 110.0
    self.assertAlmostEqual(self.timer.advanceFrame()[0], 16.0 / 60)

  def testFpsEstimate(self):
    for i in range(1, 16):
      self.clock.time = 100.0 + i * 0.02
      self.timer.advanceFrame()
    self.assertAlmostEqual(self.timer.fpsEstimate, 50.0, places = 3)


if __name__ == "__main__":
  unittest.main()
