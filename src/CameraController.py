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
Camera controller task.

The controller runs the RTS camera update once per frame for every
attached camera and hands the resulting transform to its render camera.
Each attachment may carry its own zoom, pan and turn settings; missing
ones use the defaults. Settings records may be shared between cameras.

Example:
    >>> controller = CameraController(input, clock=lambda: engine.timer.time)
    >>> controller.addCamera(RtsCamera(zoomDistance=100.0), Camera(),
    ...                      zoom=ZoomSettings(scrollAccel=10.0))
    >>> engine.addTask(controller)
"""

import Log
from Task import Task
from RtsCamera import update
from CameraSettings import ZoomSettings, PanSettings, TurnSettings


class CameraAttachment(object):
    """An RTS camera, the render camera it drives, and its settings."""

    __slots__ = ('rtsCamera', 'renderCamera', 'zoom', 'pan', 'turn')

    def __init__(self, rtsCamera, renderCamera, zoom = None, pan = None, turn = None):
        self.rtsCamera    = rtsCamera
        self.renderCamera = renderCamera
        self.zoom         = zoom or ZoomSettings()
        self.pan          = pan or PanSettings()
        self.turn         = turn or TurnSettings()


class CameraController(Task):
    """
    Task driving RTS cameras from the input state.

    Attributes:
        input (Input): Source of per-frame input snapshots.
        clock (callable): Returns the monotonic time in seconds.
        attachments (list): Attached CameraAttachment instances.
        skippedFrames (int): Frames skipped because the cursor was outside
            the window.
    """

    def __init__(self, input, clock):
        Task.__init__(self)
        self.input = input
        self.clock = clock
        self.attachments = []
        self.skippedFrames = 0

    def addCamera(self, rtsCamera, renderCamera, zoom = None, pan = None, turn = None):
        """
        Attach a camera to the controller.

        The render camera receives the initial transform straight away so
        the first frame is drawn from the right place.

        Returns:
            CameraAttachment: The new attachment.
        """
        attachment = CameraAttachment(rtsCamera, renderCamera, zoom, pan, turn)
        self.attachments.append(attachment)
        renderCamera.setTransform(rtsCamera.transform())
        return attachment

    def removeCamera(self, rtsCamera):
        self.attachments = [a for a in self.attachments if a.rtsCamera is not rtsCamera]

    def started(self):
        Log.debug("Camera controller started with %d camera(s)." % len(self.attachments))

    def run(self, ticks):
        """
        Update every attached camera.

        Args:
            ticks (float): Seconds since the previous frame.
        """
        frame = self.input.frameInput(ticks, self.clock())

        if frame.cursor is None:
            if not self.skippedFrames:
                Log.debug("Cursor outside the window, camera updates paused.")
            self.skippedFrames += 1
            return

        if self.skippedFrames:
            Log.debug("Cursor back in the window after %d skipped frame(s)." % self.skippedFrames)
            self.skippedFrames = 0

        for a in self.attachments:
            transform = update(a.rtsCamera, frame, a.zoom, a.pan, a.turn)
            if transform is not None:
                a.renderCamera.setTransform(transform)
