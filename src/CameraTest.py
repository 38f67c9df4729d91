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

from numpy import allclose, identity

from RtsCamera import RtsCamera

try:
  from Camera import Camera
except (ImportError, OSError):
  # PyOpenGL could not load a GL library on this machine
  Camera = None


@unittest.skipIf(Camera is None, "OpenGL is not available")
class CameraTest(unittest.TestCase):
  def testDefaultTransform(self):
    camera = Camera()
    self.assertTrue(allclose(camera.transform, identity(4)))
    self.assertEqual(camera.position, (0.0, 0.0, 0.0))

  def testPosition(self):
    rtsCamera = RtsCamera(focus = (50.0, 0.0, 50.0), zoomDistance = 100.0)
    camera = Camera(rtsCamera.transform())
    eye = rtsCamera.translation()
    for a, b in zip(camera.position, eye):
      self.assertAlmostEqual(a, b, places = 3)

  def testViewMatrixInvertsTransform(self):
    rtsCamera = RtsCamera(focus = (10.0, 0.0, -4.0), zoomDistance = 30.0, yaw = 0.8)
    camera = Camera()
    camera.setTransform(rtsCamera.transform())
    self.assertTrue(allclose(camera.viewMatrix().dot(camera.transform), identity(4), atol = 1e-4))

  def testViewMatrixCentersFocus(self):
    rtsCamera = RtsCamera(focus = (10.0, 0.0, -4.0), zoomDistance = 30.0, yaw = 2.0)
    view = Camera(rtsCamera.transform()).viewMatrix()
    focus = view.dot((10.0, 0.0, -4.0, 1.0))
    # The focus lies straight ahead, down the camera's -Z axis
    self.assertTrue(allclose(focus, (0.0, 0.0, -30.0, 1.0), atol = 1e-3))


if __name__ == "__main__":
  unittest.main()
