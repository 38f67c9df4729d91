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

from Engine import Engine
from Task import Task
from Timer import Timer


class SteppingClock:
  def __init__(self, step = 0.01):
    self.time = 0.0
    self.step = step

  def __call__(self):
    self.time += self.step
    return self.time


class RecordingTask(Task):
  def __init__(self, name, log):
    Task.__init__(self)
    self.name = name
    self.log = log

  def started(self):
    self.log.append((self.name, "started"))

  def stopped(self):
    self.log.append((self.name, "stopped"))

  def run(self, ticks):
    self.log.append((self.name, ticks))


class EngineTest(unittest.TestCase):
  def setUp(self):
    self.engine = Engine()
    self.engine.timer = Timer(fps = 60, clock = SteppingClock())
    self.engine.timer.highPriority = True
    self.log = []

  def testNothingToRun(self):
    self.assertFalse(self.engine.run())

  def testFrameTasksRunFirst(self):
    controller = RecordingTask("controller", self.log)
    input = RecordingTask("input", self.log)
    self.engine.addTask(controller)
    self.engine.addTask(input, synchronized = False)
    del self.log[:]

    self.assertTrue(self.engine.run())
    self.assertEqual([entry[0] for entry in self.log], ["input", "controller"])
    self.assertEqual(self.log[0][1], 0)
    self.assertGreater(self.log[1][1], 0.0)

  def testTaskStartedOnce(self):
    task = RecordingTask("task", self.log)
    self.engine.addTask(task)
    self.engine.addTask(task)
    self.assertEqual(self.log, [("task", "started")])
    self.assertEqual(self.engine.tasks, [task])

  def testRemoveTask(self):
    task = RecordingTask("task", self.log)
    self.engine.addTask(task)
    self.engine.removeTask(task)
    self.engine.removeTask(task)
    self.assertEqual(self.log, [("task", "started"), ("task", "stopped")])
    self.assertFalse(self.engine.run())

  def testPausedTaskDoesNotRun(self):
    paused = RecordingTask("paused", self.log)
    other = RecordingTask("other", self.log)
    self.engine.addTask(paused)
    self.engine.addTask(other)
    self.engine.pauseTask(paused)
    del self.log[:]

    self.engine.run()
    self.assertEqual([entry[0] for entry in self.log], ["other"])

    self.engine.resumeTask(paused)
    del self.log[:]
    self.engine.run()
    self.assertEqual([entry[0] for entry in self.log], ["paused", "other"])

  def testRemovingPausedTaskForgetsPause(self):
    task = RecordingTask("task", self.log)
    self.engine.addTask(task)
    self.engine.pauseTask(task)
    self.engine.pauseTask(task)
    self.engine.removeTask(task)
    self.assertEqual(self.engine.paused, [])
    self.engine.resumeTask(task)

  def testQuit(self):
    task = RecordingTask("task", self.log)
    self.engine.addTask(task, synchronized = False)
    self.engine.quit()
    self.assertFalse(self.engine.running)
    self.assertEqual(self.log, [("task", "started"), ("task", "stopped")])
    self.assertFalse(self.engine.run())

  def testQuitFromTask(self):
    engine = self.engine

    class QuittingTask(Task):
      def run(self, ticks):
        engine.quit()

    engine.addTask(QuittingTask())
    self.assertTrue(engine.run())
    self.assertFalse(engine.run())


if __name__ == "__main__":
  unittest.main()
