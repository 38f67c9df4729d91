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

"""Render camera module.

This module provides the Camera class that the host renders through. The
RTS camera controller recomputes its transform every frame; the Camera
only stores it and loads the matching view matrix into OpenGL.
"""

from OpenGL.GL import glMatrixMode, glLoadMatrixf, GL_MODELVIEW
from numpy import identity, float32
from numpy.linalg import inv


class Camera:
    """A 3D render camera for OpenGL.

    Attributes:
        transform: 4x4 numpy matrix placing the camera in the world. The
            camera looks down its local -Z axis with +Y up.
    """

    def __init__(self, transform = None):
        """Initialize the camera at the origin, or with a given transform."""
        if transform is None:
            transform = identity(4, dtype = float32)
        self.transform = transform

    def setTransform(self, transform):
        """Replace the camera transform with a freshly computed one."""
        self.transform = transform

    @property
    def position(self):
        """The camera's position in world space as an (x, y, z) tuple."""
        return (float(self.transform[0, 3]), float(self.transform[1, 3]), float(self.transform[2, 3]))

    def viewMatrix(self):
        """Get the world-to-camera matrix, the inverse of the transform."""
        return inv(self.transform).astype(float32)

    def apply(self):
        """Apply the camera transformation to the OpenGL modelview matrix.

        Loads the view matrix in place of the current modelview matrix. This
        should be called after setting up the projection and before rendering
        scene objects.
        """
        glMatrixMode(GL_MODELVIEW)
        # OpenGL expects column-major storage
        glLoadMatrixf(self.viewMatrix().T)
