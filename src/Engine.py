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
Frame scheduler.

One call to Engine.run() is one frame of the demo:

1. frame tasks run first with ticks=0; input polling is one, so the
   camera sees this frame's events,
2. the timer waits for the next frame and reports the elapsed seconds,
3. synchronized tasks run with that frame time; the camera controller is
   one.

    engine = Engine(fps=60)
    engine.addTask(input, synchronized=False)
    engine.addTask(controller)
    while engine.run():
        pass
"""

import Log
from Timer import Timer


class Engine:
    """
    Runs tasks once per frame.

    Attributes:
        tasks (list): Synchronized tasks, run with the frame time.
        frameTasks (list): Tasks run at the start of each frame.
        timer (Timer): Frame pacing and the frame time.
        paused (list): Tasks that are skipped until resumed.
        currentTask (Task): The task being run, or None between tasks.
        running (bool): False once quit() was called.
    """

    def __init__(self, fps=60, tickrate=1.0):
        self.tasks = []
        self.frameTasks = []
        self.timer = Timer(fps=fps, tickrate=tickrate)
        self.currentTask = None
        self.paused = []
        self.running = True

    def quit(self):
        """Remove every task and stop running."""
        for task in list(self.tasks + self.frameTasks):
            self.removeTask(task)
        self.running = False

    def addTask(self, task, synchronized=True):
        """
        Schedule a task. Adding a task twice to the same queue does nothing.

        Args:
            task (Task): The task to add.
            synchronized (bool): True to run it with the frame time after
                the timer advances, False to run it first with ticks=0.
        """
        queue = self.tasks if synchronized else self.frameTasks

        if task in queue:
            return
        queue.append(task)
        Log.debug("Task %s added." % task.__class__.__name__)
        task.started()

    def removeTask(self, task):
        """Unschedule a task; stopped() is called if it was scheduled."""
        found = False
        for queue in (self.tasks, self.frameTasks):
            if task in queue:
                queue.remove(task)
                found = True
        if task in self.paused:
            self.paused.remove(task)
        if found:
            Log.debug("Task %s removed." % task.__class__.__name__)
            task.stopped()

    def pauseTask(self, task):
        if task not in self.paused:
            self.paused.append(task)

    def resumeTask(self, task):
        if task in self.paused:
            self.paused.remove(task)

    def _runTask(self, task, ticks=0):
        if task in self.paused:
            return
        self.currentTask = task
        try:
            task.run(ticks)
        finally:
            self.currentTask = None

    def run(self):
        """
        Run one frame.

        Returns:
            bool: False if the engine has quit or has nothing left to run.
        """
        if not self.running or (not self.frameTasks and not self.tasks):
            return False

        # Tasks may add or remove tasks while running
        for task in list(self.frameTasks):
            self._runTask(task)

        for ticks in self.timer.advanceFrame():
            for task in list(self.tasks):
                self._runTask(task, ticks)

        return True
