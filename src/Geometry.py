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
Geometry helpers for the RTS camera.

Small math utilities shared by the camera update and the render camera:
range clamping, zone interpolation, and a rotation quaternion that works
with pygame vectors and produces numpy matrices for OpenGL.

Ranges are (start, end) tuples with start <= end. Inverted ranges are not
checked for; the results are undefined in that case.

Example:
    >>> pitch = lerpInZone(50.0, (5.0, 100.0), (0.57, 1.16))
    >>> rotation = Quaternion.fromYawPitchRoll(0.0, -pitch, 0.0)
    >>> eye = rotation.rotate(Vector3(0.0, 0.0, 50.0))
"""

import math

from numpy import identity, float32
from pygame.math import Vector3

TAU = 2.0 * math.pi


def clamp(x, range):
    """
    Clamp a value into an inclusive (start, end) range.

    Args:
        x (float): Value to clamp.
        range (tuple): (start, end) bounds.

    Returns:
        float: end if x is above it, start if x is below it, else x.
    """
    start, end = range
    if x > end:
        return end
    elif x < start:
        return start
    return x


def lerpInZone(value, zone, values):
    """
    Linearly map a value from a zone into a range of values.

    The value is first clamped into the zone, so anything outside the zone
    maps onto the corresponding end of values.

    Args:
        value (float): Input value.
        zone (tuple): (start, end) domain. Must not be empty.
        values (tuple): (start, end) target range.

    Returns:
        float: The interpolated value.
    """
    inZone = clamp(value, zone)
    normalised = (inZone - zone[0]) / (zone[1] - zone[0])
    return normalised * (values[1] - values[0]) + values[0]


class Quaternion(object):
    """
    Unit rotation quaternion.

    Attributes:
        w (float): Scalar part.
        x, y, z (float): Vector part.
    """

    __slots__ = ('w', 'x', 'y', 'z')

    def __init__(self, w = 1.0, x = 0.0, y = 0.0, z = 0.0):
        self.w = float(w)
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return "Quaternion(%.6f, %.6f, %.6f, %.6f)" % (self.w, self.x, self.y, self.z)

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return (self.w, self.x, self.y, self.z) == (other.w, other.x, other.y, other.z)

    def __iter__(self):
        yield self.w
        yield self.x
        yield self.y
        yield self.z

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def fromAxisAngle(cls, axis, angle):
        """
        Create a rotation of angle radians around a unit axis.

        Args:
            axis (Vector3): Normalized rotation axis.
            angle (float): Angle in radians, counterclockwise when looking
                down the axis toward the origin.
        """
        s = math.sin(angle * 0.5)
        return cls(math.cos(angle * 0.5), axis[0] * s, axis[1] * s, axis[2] * s)

    @classmethod
    def fromRotationX(cls, angle):
        return cls.fromAxisAngle((1.0, 0.0, 0.0), angle)

    @classmethod
    def fromRotationY(cls, angle):
        return cls.fromAxisAngle((0.0, 1.0, 0.0), angle)

    @classmethod
    def fromRotationZ(cls, angle):
        return cls.fromAxisAngle((0.0, 0.0, 1.0), angle)

    @classmethod
    def fromYawPitchRoll(cls, yaw, pitch, roll):
        """
        Compose a rotation from Euler angles.

        The result applies roll around Z first, then pitch around X, then
        yaw around Y: Ry(yaw) * Rx(pitch) * Rz(roll).
        """
        return cls.fromRotationY(yaw) * cls.fromRotationX(pitch) * cls.fromRotationZ(roll)

    def __mul__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        w1, x1, y1, z1 = self
        w2, x2, y2, z2 = other
        return Quaternion(
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        )

    def conjugate(self):
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def rotate(self, v):
        """
        Rotate a vector by this quaternion.

        Args:
            v (Vector3): The vector to rotate.

        Returns:
            Vector3: A new rotated vector.
        """
        q = Vector3(self.x, self.y, self.z)
        v = Vector3(v)
        t = q.cross(v) * 2.0
        return v + t * self.w + q.cross(t)

    def toMatrix(self):
        """
        Get the 3x3 rotation matrix of this quaternion.

        Returns:
            numpy.ndarray: Row-major 3x3 float32 matrix acting on column
                vectors.
        """
        w, x, y, z = self
        m = identity(3, dtype = float32)
        m[0, 0] = 1.0 - 2.0 * (y * y + z * z)
        m[0, 1] = 2.0 * (x * y - w * z)
        m[0, 2] = 2.0 * (x * z + w * y)
        m[1, 0] = 2.0 * (x * y + w * z)
        m[1, 1] = 1.0 - 2.0 * (x * x + z * z)
        m[1, 2] = 2.0 * (y * z - w * x)
        m[2, 0] = 2.0 * (x * z - w * y)
        m[2, 1] = 2.0 * (y * z + w * x)
        m[2, 2] = 1.0 - 2.0 * (x * x + y * y)
        return m


def fromRotationTranslation(rotation, translation):
    """
    Build a 4x4 affine transform from a rotation and a translation.

    Args:
        rotation (Quaternion): Orientation.
        translation (Vector3): Position.

    Returns:
        numpy.ndarray: Row-major 4x4 float32 matrix acting on column
            vectors; the translation is in the last column.
    """
    m = identity(4, dtype = float32)
    m[:3, :3] = rotation.toMatrix()
    m[0, 3] = translation[0]
    m[1, 3] = translation[1]
    m[2, 3] = translation[2]
    return m
