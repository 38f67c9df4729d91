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

"""
Demo scene.

A flat field of beige cubes laid out on a 10 unit grid, lit by a single
warm light. It gives the RTS camera something to pan, turn and zoom
around.
"""

from OpenGL.GL import *
from OpenGL.GLU import *
from itertools import product

BEIGE      = (0.96, 0.96, 0.86, 1.0)
LIGHT      = (0xef / 255.0, 0xeb / 255.0, 0xd8 / 255.0, 1.0)
BACKGROUND = (0.4, 0.4, 0.4, 1.0)

# (normal, corners) for each face of a unit cube centered on the origin
CUBE_FACES = [
  (( 0,  0,  1), [(-1, -1,  1), ( 1, -1,  1), ( 1,  1,  1), (-1,  1,  1)]),
  (( 0,  0, -1), [(-1, -1, -1), (-1,  1, -1), ( 1,  1, -1), ( 1, -1, -1)]),
  (( 0,  1,  0), [(-1,  1, -1), (-1,  1,  1), ( 1,  1,  1), ( 1,  1, -1)]),
  (( 0, -1,  0), [(-1, -1, -1), ( 1, -1, -1), ( 1, -1,  1), (-1, -1,  1)]),
  (( 1,  0,  0), [( 1, -1, -1), ( 1,  1, -1), ( 1,  1,  1), ( 1, -1,  1)]),
  ((-1,  0,  0), [(-1, -1, -1), (-1, -1,  1), (-1,  1,  1), (-1,  1, -1)]),
]

def gridPositions(start = 0, stop = 100, step = 10):
  """Get the (x, 0, z) positions of the cube grid, inclusive of stop."""
  intervals = range(start, stop + 1, step)
  return [(float(x), 0.0, float(z)) for x, z in product(intervals, intervals)]

class Scene:
  """
  The demo scene.

  Attributes:
      positions: Cube centers.
      cubeSize: Edge length of each cube.
      lightPosition: World position of the point light.
  """

  def __init__(self, cubeSize = 5.0, lightPosition = (10.0, 5.0, 10.0)):
    self.positions     = gridPositions()
    self.cubeSize      = cubeSize
    self.lightPosition = lightPosition
    self.displayList   = None

  def setProjection(self, width, height, fov = 45.0, near = 0.1, far = 1000.0):
    """Set up the perspective projection for a window of the given size."""
    glViewport(0, 0, int(width), int(height))
    glMatrixMode(GL_PROJECTION)
    glLoadIdentity()
    gluPerspective(fov, float(width) / max(1.0, float(height)), near, far)
    glMatrixMode(GL_MODELVIEW)

  def _compile(self):
    self.displayList = glGenLists(1)
    glNewList(self.displayList, GL_COMPILE)
    half = self.cubeSize * 0.5
    glBegin(GL_QUADS)
    for x, y, z in self.positions:
      for normal, corners in CUBE_FACES:
        glNormal3f(*normal)
        for cx, cy, cz in corners:
          glVertex3f(x + cx * half, y + cy * half, z + cz * half)
    glEnd()
    glEndList()

  def render(self, camera):
    """
    Render the scene as seen from a render camera.

    Args:
        camera: The Camera whose view matrix is applied.
    """
    glClearColor(*BACKGROUND)
    glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
    glEnable(GL_DEPTH_TEST)
    glEnable(GL_CULL_FACE)

    camera.apply()

    glEnable(GL_LIGHTING)
    glEnable(GL_LIGHT0)
    glLightfv(GL_LIGHT0, GL_POSITION, (self.lightPosition[0], self.lightPosition[1], self.lightPosition[2], 1.0))
    glLightfv(GL_LIGHT0, GL_DIFFUSE, LIGHT)
    glLightfv(GL_LIGHT0, GL_AMBIENT, (0.2, 0.2, 0.2, 1.0))
    glMaterialfv(GL_FRONT, GL_AMBIENT_AND_DIFFUSE, BEIGE)

    if self.displayList is None:
      self._compile()
    glCallList(self.displayList)

    glDisable(GL_LIGHTING)
