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

import pygame
from numpy import array_equal

from CameraController import CameraController
from CameraSettings import ZoomSettings, PanSettings, TurnSettings
from Input import Input
from RtsCamera import RtsCamera


class FakeRenderCamera:
  def __init__(self):
    self.transforms = []

  def setTransform(self, transform):
    self.transforms.append(transform)


class FakeClock:
  def __init__(self):
    self.time = 0.0

  def __call__(self):
    return self.time


class CameraControllerTest(unittest.TestCase):
  def setUp(self):
    self.input = Input((800, 600), cursor = (400, 300))
    self.clock = FakeClock()
    self.controller = CameraController(self.input, self.clock)

  def step(self, delta = 0.02):
    self.clock.time += delta
    self.controller.run(delta)

  def testAddCameraSetsInitialTransform(self):
    rtsCamera, renderCamera = RtsCamera(zoomDistance = 50.0), FakeRenderCamera()
    attachment = self.controller.addCamera(rtsCamera, renderCamera)
    self.assertEqual(len(renderCamera.transforms), 1)
    self.assertTrue(array_equal(renderCamera.transforms[0], rtsCamera.transform()))
    self.assertEqual(attachment.zoom, ZoomSettings())
    self.assertEqual(attachment.pan, PanSettings())
    self.assertEqual(attachment.turn, TurnSettings())

  def testRunPushesTransform(self):
    rtsCamera, renderCamera = RtsCamera(zoomDistance = 50.0), FakeRenderCamera()
    self.controller.addCamera(rtsCamera, renderCamera)
    self.input.pressedKeys.add(pygame.K_w)

    self.step()
    self.assertLess(rtsCamera.focus.z, 0.0)
    self.assertEqual(len(renderCamera.transforms), 2)
    self.assertTrue(array_equal(renderCamera.transforms[-1], rtsCamera.transform()))

  def testSkipsFramesWhileCursorOutside(self):
    rtsCamera, renderCamera = RtsCamera(zoomDistance = 50.0), FakeRenderCamera()
    self.controller.addCamera(rtsCamera, renderCamera)
    self.input.pressedKeys.add(pygame.K_w)
    self.input.cursor = None

    self.step()
    self.step()
    self.assertEqual(self.controller.skippedFrames, 2)
    self.assertEqual(rtsCamera.focus.z, 0.0)
    self.assertEqual(len(renderCamera.transforms), 1)

    self.input.cursor = (400, 300)
    self.step()
    self.assertEqual(self.controller.skippedFrames, 0)
    self.assertLess(rtsCamera.focus.z, 0.0)
    self.assertEqual(len(renderCamera.transforms), 2)

  def testScrollUsesControllerClock(self):
    rtsCamera = RtsCamera(zoomDistance = 50.0)
    self.controller.addCamera(rtsCamera, FakeRenderCamera())
    self.input.scrollEvents.append(1.0)

    self.step()
    self.assertEqual(rtsCamera.lastScrollTime, self.clock.time)
    self.assertLess(rtsCamera.zoomVelocity, 0.0)
    self.assertEqual(self.input.scrollEvents, [])

  def testCamerasUseTheirOwnSettings(self):
    slow, fast = RtsCamera(zoomDistance = 50.0), RtsCamera(zoomDistance = 50.0)
    pan = PanSettings(keyboardAccel = 50.0, maxSpeed = 25.0)
    self.controller.addCamera(slow, FakeRenderCamera())
    self.controller.addCamera(fast, FakeRenderCamera(), pan = pan)
    self.input.pressedKeys.add(pygame.K_d)

    self.step(0.1)
    self.assertGreater(fast.panVelocity.x, slow.panVelocity.x)
    self.assertGreater(fast.focus.x, slow.focus.x)

  def testSharedSettings(self):
    zoom = ZoomSettings(scrollAccel = 10.0)
    first, second = RtsCamera(zoomDistance = 50.0), RtsCamera(zoomDistance = 50.0)
    self.controller.addCamera(first, FakeRenderCamera(), zoom = zoom)
    self.controller.addCamera(second, FakeRenderCamera(), zoom = zoom)
    self.input.scrollEvents.append(-1.0)

    self.step()
    self.assertEqual(first.zoomVelocity, second.zoomVelocity)
    self.assertEqual(first.zoomDistance, second.zoomDistance)

  def testRemoveCamera(self):
    rtsCamera, renderCamera = RtsCamera(), FakeRenderCamera()
    self.controller.addCamera(rtsCamera, renderCamera)
    self.controller.removeCamera(rtsCamera)
    self.assertEqual(self.controller.attachments, [])

    self.step()
    self.assertEqual(len(renderCamera.transforms), 1)


if __name__ == "__main__":
  unittest.main()
