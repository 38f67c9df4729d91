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
Frame pacing and the clocks the camera update runs on.

advanceFrame() blocks until the next frame is due and returns the frame
time in seconds. The `time` property is a monotonic "seconds since the
timer was created" clock; the camera controller measures the scroll grace
window on it.

    >>> timer = Timer(fps=60)
    >>> delta = timer.advanceFrame()[0]
    >>> now = timer.time
"""

import pygame
import time

# Longest frame time handed out, in frames; a stalled window (being
# dragged, say) must not send the camera flying when it resumes.
MAX_FRAME_STEPS = 16

# Seconds between FPS estimate updates
FPS_ESTIMATE_INTERVAL = 0.25


class Timer(object):
    """
    Frame timer.

    Attributes:
        fps (int): Target frame rate.
        timestep (float): Target frame time in seconds.
        tickrate (float): Time scale; 1.0 is real time.
        clock (callable): Monotonic clock in seconds.
        ticks (float): Timer time at the last frame, in seconds.
        frame (int): Frames advanced so far.
        fpsEstimate (float): Measured frame rate.
        highPriority (bool): Busy-wait for the next frame instead of
            yielding to other processes.
    """

    def __init__(self, fps=60, tickrate=1.0, clock=time.perf_counter):
        self.fps = fps
        self.timestep = 1.0 / fps
        self.tickrate = tickrate
        self.clock = clock
        self.startTime = clock()
        self.ticks = self.getTime()
        self.frame = 0
        self.fpsEstimate = 0
        self.fpsEstimateStartTick = self.ticks
        self.fpsEstimateStartFrame = self.frame
        self.highPriority = False

    def getTime(self):
        """Seconds since the timer was created, scaled by the tick rate."""
        return (self.clock() - self.startTime) * self.tickrate

    time = property(getTime)

    def _updateFpsEstimate(self, ticks):
        elapsed = ticks - self.fpsEstimateStartTick
        if elapsed <= FPS_ESTIMATE_INTERVAL:
            return
        self.fpsEstimate = (self.frame - self.fpsEstimateStartFrame) / elapsed
        self.fpsEstimateStartTick = ticks
        self.fpsEstimateStartFrame = self.frame

    def advanceFrame(self):
        """
        Wait for the next frame.

        Returns:
            list: One frame time in seconds, at most MAX_FRAME_STEPS
                timesteps long.
        """
        ticks = self.getTime()
        while ticks - self.ticks < self.timestep:
            if not self.highPriority:
                pygame.time.wait(0)
            ticks = self.getTime()

        diff = ticks - self.ticks
        self.ticks = ticks
        self.frame += 1
        self._updateFpsEstimate(ticks)

        return [min(diff, self.timestep * MAX_FRAME_STEPS)]
