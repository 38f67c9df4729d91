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
RTS camera module.

This module holds the state of a real-time-strategy style camera and the
per-frame update that drives it. The camera orbits a focus point on the
ground plane. Keyboard keys, the cursor resting at a window edge, and the
scroll wheel accelerate its pan, turn and zoom velocities. Idle
deceleration then brings each velocity back to rest once its input stops.

The pitch is not controlled directly: it follows the zoom distance, so
the view tilts toward top-down as the camera pulls away.

The update is driven by the host once per frame:

    >>> camera = RtsCamera(focus = Vector3(50, 0, 50), zoomDistance = 100.0)
    >>> frame = FrameInput(delta = 0.016, now = 12.5, cursor = (400, 300),
    ...                    windowSize = (800, 600), pressedKeys = {pygame.K_w})
    >>> transform = update(camera, frame)

All settings records are optional; missing ones fall back to defaults.
"""

import math

from pygame.math import Vector2, Vector3

from CameraSettings import ZoomSettings, PanSettings, TurnSettings
from Geometry import TAU, Quaternion, clamp, lerpInZone, fromRotationTranslation

# For this long after a scroll tick the zoom is treated as still being
# driven, otherwise idle deceleration kicks in between ticks.
SCROLL_TICK_GRACE_SECS = 0.05


class FrameInput(object):
    """
    Snapshot of the host input for one frame.

    Attributes:
        delta (float): Seconds elapsed since the previous frame.
        now (float): Monotonic clock time in seconds.
        cursor (tuple): (x, y) cursor position in window coordinates with
            the origin at the top-left corner, or None when the cursor is
            outside the window.
        windowSize (tuple): (width, height) in the cursor's units.
        pressedKeys (frozenset): pygame key codes currently held down.
        scrollEvents (tuple): Signed vertical scroll amounts received since
            the previous frame, oldest first. Positive scrolls away from the
            user.
    """

    __slots__ = ('delta', 'now', 'cursor', 'windowSize', 'pressedKeys', 'scrollEvents')

    def __init__(self, delta, now, cursor, windowSize, pressedKeys = (), scrollEvents = ()):
        self.delta        = float(delta)
        self.now          = float(now)
        self.cursor       = None if cursor is None else (float(cursor[0]), float(cursor[1]))
        self.windowSize   = (float(windowSize[0]), float(windowSize[1]))
        self.pressedKeys  = frozenset(pressedKeys)
        self.scrollEvents = tuple(scrollEvents)

    def __repr__(self):
        return "FrameInput(delta=%.4f, now=%.4f, cursor=%r, windowSize=%r, keys=%d, scrolls=%d)" % \
               (self.delta, self.now, self.cursor, self.windowSize, len(self.pressedKeys), len(self.scrollEvents))

    @property
    def scroll(self):
        """The latest scroll amount of this frame, or None."""
        if self.scrollEvents:
            return self.scrollEvents[-1]
        return None

    def anyPressed(self, keys):
        """Check whether any of the given keys is held down."""
        return any(k in self.pressedKeys for k in keys)


class Deceleration(object):
    """
    Idle deceleration flags for one velocity component.

    Attributes:
        pos (bool): Decelerate against motion in the positive direction.
        neg (bool): Decelerate against motion in the negative direction.
    """

    __slots__ = ('pos', 'neg')

    def __init__(self, pos = True, neg = True):
        self.pos = pos
        self.neg = neg

    def __eq__(self, other):
        if not isinstance(other, Deceleration):
            return NotImplemented
        return (self.pos, self.neg) == (other.pos, other.neg)

    def __repr__(self):
        return "Deceleration(pos=%r, neg=%r)" % (self.pos, self.neg)

    def apply(self, velocity, magnitude, delta):
        """
        Decelerate a velocity component.

        Args:
            velocity (float): Current velocity.
            magnitude (float): Idle deceleration in units/s^2.
            delta (float): Frame time in seconds.

        Returns:
            float: The new velocity. The change never exceeds the velocity's
                own magnitude, so a lone deceleration stops exactly at zero.
        """
        if velocity == 0.0:
            return velocity

        if self.pos and self.neg:
            sign = -math.copysign(1.0, velocity)
        elif self.pos:
            sign = -1.0
        elif self.neg:
            sign = 1.0
        else:
            return velocity

        decel = min(abs(magnitude * delta), abs(velocity))
        return velocity + decel * sign


class RtsCamera(object):
    """
    State of one RTS camera.

    Attributes:
        focus (Vector3): Where the camera is looking (its target).
        rotation (Quaternion): Orientation of the camera. It is recomputed
            from yaw and the zoom distance on every update and must not be
            modified directly; change yaw or the zoom settings instead.
        yaw (float): How far the camera has turned, in radians, within
            [0, 2*pi).
        zoomVelocity (float): Velocity at which the camera zooms out
            (negative zooms in).
        panVelocity (Vector2): Pan velocity in camera space; x is to the
            right, y is forward along the ground.
        turnVelocity (float): Yaw velocity in rad/s; positive turns left.
        lastScrollTime (float): Clock time of the last scroll tick.
        zoomDistance (float): Distance between the focus and the eye point.
    """

    def __init__(self, focus = None, zoomDistance = 10.0, yaw = 0.0, zoom = None):
        """
        Create a camera at rest.

        Args:
            focus (Vector3): Initial focus point. Defaults to the origin.
            zoomDistance (float): Initial distance from the focus.
            yaw (float): Initial yaw in radians.
            zoom (ZoomSettings): Settings used to derive the initial
                rotation. Defaults to ZoomSettings().
        """
        self.focus          = Vector3(0.0, 0.0, 0.0) if focus is None else Vector3(focus)
        self.yaw            = float(yaw)
        self.zoomVelocity   = 0.0
        self.panVelocity    = Vector2(0.0, 0.0)
        self.turnVelocity   = 0.0
        self.lastScrollTime = -math.inf
        self.zoomDistance   = float(zoomDistance)
        self.rotation       = self.orientation(zoom or ZoomSettings())

    def __repr__(self):
        return "RtsCamera(focus=%r, yaw=%.4f, zoomDistance=%.4f)" % (self.focus, self.yaw, self.zoomDistance)

    def pitch(self, zoom):
        """Get the pitch in radians for the current zoom distance."""
        return lerpInZone(self.zoomDistance, zoom.angleChangeZone, zoom.angleRange)

    def orientation(self, zoom):
        """Get the rotation implied by the current yaw and zoom distance."""
        return Quaternion.fromYawPitchRoll(self.yaw, -self.pitch(zoom), 0.0)

    def translation(self):
        """Get the eye point: the focus pushed back along the view axis."""
        return self.focus + self.rotation.rotate(Vector3(0.0, 0.0, self.zoomDistance))

    def transform(self):
        """
        Get the camera transform.

        Returns:
            numpy.ndarray: 4x4 matrix placing the render camera at the eye
                point with the camera's rotation.
        """
        return fromRotationTranslation(self.rotation, self.translation())

    def rotate(self, angle):
        """
        Turn the camera in place by angle radians around the world up axis.

        The eye point stays where it is and the focus swings around it. The
        yaw wraps by a single full turn, so one call must not turn by more
        than 2*pi.
        """
        self.yaw += angle

        if self.yaw >= TAU:
            self.yaw -= TAU

        if self.yaw < 0.0:
            self.yaw += TAU

        rotationY = Quaternion.fromRotationY(angle)
        eye = self.translation()
        self.focus = rotationY.rotate(self.focus - eye) + eye

    def tick(self, frame, zoom, pan, turn):
        """
        Advance the camera by one frame.

        Args:
            frame (FrameInput): Input for this frame.
            zoom (ZoomSettings): Zoom parameters.
            pan (PanSettings): Pan parameters.
            turn (TurnSettings): Turn parameters.

        Returns:
            bool: False if the frame was skipped because the cursor is
                outside the window, in which case nothing changes. True
                otherwise.
        """
        if frame.cursor is None:
            return False

        delta, now = frame.delta, frame.now
        cursorX, cursorY = frame.cursor
        width, height = frame.windowSize

        xDecel, yDecel, turnDecel = Deceleration(), Deceleration(), Deceleration()

        if now - self.lastScrollTime < SCROLL_TICK_GRACE_SECS:
            zoomDecel = Deceleration(pos = False, neg = False)
        else:
            zoomDecel = Deceleration()

        # Cursor at the window edges
        inTurnBand = cursorY < height * turn.mouseTurnMargin

        if cursorX < pan.mouseAccelMargin:
            if inTurnBand:
                self.turnVelocity += turn.mouseAccel * delta
                turnDecel.pos = False
            else:
                self.panVelocity.x -= pan.mouseAccel * delta
                xDecel.neg = False
        elif cursorX > width - pan.mouseAccelMargin:
            if inTurnBand:
                self.turnVelocity -= turn.mouseAccel * delta
                turnDecel.neg = False
            else:
                self.panVelocity.x += pan.mouseAccel * delta
                xDecel.pos = False

        if cursorY < pan.mouseAccelMargin:
            self.panVelocity.y += pan.mouseAccel * delta
            yDecel.pos = False
        elif cursorY > height - pan.mouseAccelMargin:
            self.panVelocity.y -= pan.mouseAccel * delta
            yDecel.neg = False

        # Keyboard
        if frame.anyPressed(pan.rightKeys):
            self.panVelocity.x += pan.keyboardAccel * delta
            xDecel.pos = False

        if frame.anyPressed(pan.leftKeys):
            self.panVelocity.x -= pan.keyboardAccel * delta
            xDecel.neg = False

        if frame.anyPressed(pan.upKeys):
            self.panVelocity.y += pan.keyboardAccel * delta
            yDecel.pos = False

        if frame.anyPressed(pan.downKeys):
            self.panVelocity.y -= pan.keyboardAccel * delta
            yDecel.neg = False

        if frame.anyPressed(turn.rightKeys):
            self.turnVelocity -= turn.keyboardAccel * delta
            turnDecel.neg = False

        if frame.anyPressed(turn.leftKeys):
            self.turnVelocity += turn.keyboardAccel * delta
            turnDecel.pos = False

        # Scroll wheel; a positive scroll zooms in
        scroll = frame.scroll
        if scroll is not None:
            if scroll > 0.0:
                zoomDecel.neg = False
            else:
                zoomDecel.pos = False

            self.zoomVelocity -= scroll * zoom.scrollAccel
            self.lastScrollTime = now

        if frame.anyPressed(zoom.zoomInKeys):
            self.zoomVelocity -= zoom.keyboardAccel * delta
            zoomDecel.neg = False

        if frame.anyPressed(zoom.zoomOutKeys):
            self.zoomVelocity += zoom.keyboardAccel * delta
            zoomDecel.pos = False

        # Idle deceleration
        self.turnVelocity = turnDecel.apply(self.turnVelocity, turn.idleDeceleration, delta)
        self.zoomVelocity = zoomDecel.apply(self.zoomVelocity, zoom.idleDeceleration, delta)
        self.panVelocity.x = xDecel.apply(self.panVelocity.x, pan.idleDeceleration, delta)
        self.panVelocity.y = yDecel.apply(self.panVelocity.y, pan.idleDeceleration, delta)

        # Clamp velocities; zoom is only capped outward
        if self.panVelocity.length_squared() > pan.maxSpeed * pan.maxSpeed:
            self.panVelocity.scale_to_length(pan.maxSpeed)

        self.zoomVelocity = min(self.zoomVelocity, zoom.maxVelocity)
        self.turnVelocity = clamp(self.turnVelocity, (-turn.maxSpeed, turn.maxSpeed))

        # Zoom
        self.zoomDistance += self.zoomVelocity * delta
        self.zoomDistance = clamp(self.zoomDistance, zoom.distanceRange)

        # Turn
        self.rotate(self.turnVelocity * delta)
        self.yaw = clamp(self.yaw, turn.yawRange)

        # Pitch follows the zoom distance
        self.rotation = self.orientation(zoom)

        # Pan along the ground plane, ignoring pitch
        forward = Quaternion.fromRotationY(self.yaw)
        distanceFactor = lerpInZone(self.zoomDistance, zoom.angleRange, pan.panSpeedZoomFactorRange)
        self.focus += forward.rotate(Vector3(self.panVelocity.x * delta, 0.0, 0.0)) * distanceFactor
        self.focus += forward.rotate(Vector3(0.0, 0.0, -self.panVelocity.y * delta)) * distanceFactor

        return True


def update(camera, frame, zoom = None, pan = None, turn = None):
    """
    Run one frame of the camera update with optional settings.

    Args:
        camera (RtsCamera): The camera to advance.
        frame (FrameInput): Input for this frame.
        zoom (ZoomSettings): Zoom parameters, or None for the defaults.
        pan (PanSettings): Pan parameters, or None for the defaults.
        turn (TurnSettings): Turn parameters, or None for the defaults.

    Returns:
        numpy.ndarray: The camera's new 4x4 transform, or None if the frame
            was skipped.
    """
    zoom = zoom or ZoomSettings()
    pan  = pan or PanSettings()
    turn = turn or TurnSettings()

    if not camera.tick(frame, zoom, pan, turn):
        return None
    return camera.transform()
