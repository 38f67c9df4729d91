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
Task module.

This module provides the base Task class, a unit of per-frame work run by
the Engine. Input polling and the camera controller are tasks.

Example:
    >>> class SpinTask(Task):
    ...     def __init__(self, camera):
    ...         Task.__init__(self)
    ...         self.camera = camera
    ...
    ...     def run(self, ticks):
    ...         self.camera.rotate(0.5 * ticks)
"""


class Task:
    """
    Base class for scheduled tasks in the engine.

    Lifecycle:
        1. Task is created
        2. Task is added to engine via Engine.addTask()
        3. started() is called once
        4. run(ticks) is called each frame
        5. Task is removed via Engine.removeTask()
        6. stopped() is called once
    """

    def __init__(self):
        pass

    def started(self):
        """Called when the task is added to the engine."""
        pass

    def stopped(self):
        """Called when the task is removed from the engine."""
        pass

    def run(self, ticks):
        """
        Execute one frame of the task's work.

        Args:
            ticks (float): Seconds elapsed since the previous frame. Frame
                tasks that run before the timer advances receive 0.
        """
        pass
