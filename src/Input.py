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
Input handling module.

This module turns pygame events into the per-frame input the camera
update consumes. It tracks which keys are held, where the cursor is (and
whether it is inside the window at all), the window size, and the scroll
wheel events received since the previous frame.

The module includes:
    - KeyListener: Interface for keyboard event handlers
    - MouseListener: Interface for mouse event handlers
    - SystemEventListener: Interface for system events (quit, resize)
    - Input: Input task that polls pygame events, updates the tracked
      state, dispatches events to registered listeners and builds
      FrameInput snapshots

Example:
    >>> input = Input((800, 600))
    >>> engine.addTask(input, synchronized=False)
    >>> ...
    >>> frame = input.frameInput(delta, now)
"""

import pygame
import Log

from Task import Task
from RtsCamera import FrameInput

class KeyListener:
    """
    Interface for keyboard event listeners.

    Methods should return True if the event was consumed and should not be
    passed to other listeners, False otherwise. Consumed events still
    update the pressed-key set.
    """

    def keyPressed(self, key, str):
        """
        Called when a key is pressed.

        Args:
            key: pygame key code.
            str: Unicode character for the key, or '' for non-character keys.
        """
        pass

    def keyReleased(self, key):
        pass

class MouseListener:
    """
    Interface for mouse event listeners.

    Methods should return True if the event was consumed and should not be
    passed to other listeners, False otherwise.
    """

    def mouseMoved(self, pos, rel):
        pass

    def mouseWheel(self, amount):
        """
        Called when the scroll wheel moves.

        Args:
            amount (float): Signed vertical scroll; positive scrolls away
                from the user.
        """
        pass

    def mouseLeft(self):
        """Called when the cursor leaves the window."""
        pass

class SystemEventListener:
    """
    Interface for system event listeners.
    """

    def screenResized(self, size):
        """
        Called when the window is resized.

        Args:
            size (tuple): (width, height) new window dimensions.
        """
        pass

    def quit(self):
        """
        Called when the application should terminate.
        """
        pass


class Input(Task):
    """
    Input task tracking the state the camera update needs.

    Attributes:
        pressedKeys (set): pygame key codes currently held down.
        cursor (tuple): Last cursor position, or None while the cursor is
            outside the window.
        lastCursor (tuple): Last known cursor position, kept while the
            cursor is outside so it can be restored when it re-enters.
        windowSize (tuple): (width, height) of the window.
        scrollEvents (list): Scroll amounts received since the last
            frameInput() call.
        mouseListeners (list): Registered MouseListener instances.
        keyListeners (list): Registered KeyListener instances (normal priority).
        priorityKeyListeners (list): Registered KeyListener instances (high priority).
        systemListeners (list): Registered SystemEventListener instances.
    """

    def __init__(self, windowSize, cursor=None):
        """
        Initialize the input tracker.

        Args:
            windowSize (tuple): Initial (width, height) of the window.
            cursor (tuple): Initial cursor position, or None if unknown or
                outside the window.
        """
        Task.__init__(self)
        self.pressedKeys = set()
        self.cursor = None if cursor is None else tuple(cursor)
        self.lastCursor = self.cursor
        self.windowSize = tuple(windowSize)
        self.scrollEvents = []
        self.mouseListeners = []
        self.keyListeners = []
        self.systemListeners = []
        self.priorityKeyListeners = []

    def addMouseListener(self, listener):
        if not listener in self.mouseListeners:
            self.mouseListeners.append(listener)

    def removeMouseListener(self, listener):
        if listener in self.mouseListeners:
            self.mouseListeners.remove(listener)

    def addKeyListener(self, listener, priority=False):
        """
        Register a keyboard event listener.

        Priority listeners receive events before normal listeners and can
        consume events to prevent them from reaching normal listeners.

        Args:
            listener (KeyListener): Object implementing KeyListener interface.
            priority (bool): If True, register as high-priority listener.
        """
        if priority:
            if not listener in self.priorityKeyListeners:
                self.priorityKeyListeners.append(listener)
        else:
            if not listener in self.keyListeners:
                self.keyListeners.append(listener)

    def removeKeyListener(self, listener):
        if listener in self.keyListeners:
            self.keyListeners.remove(listener)
        if listener in self.priorityKeyListeners:
            self.priorityKeyListeners.remove(listener)

    def addSystemEventListener(self, listener):
        if not listener in self.systemListeners:
            self.systemListeners.append(listener)

    def removeSystemEventListener(self, listener):
        if listener in self.systemListeners:
            self.systemListeners.remove(listener)

    def broadcastEvent(self, listeners, function, *args):
        """
        Broadcast an event to a list of listeners.

        Iterates through listeners in reverse order (most recently added first)
        and calls the specified method. Stops if a listener returns True
        (event consumed).

        Returns:
            bool: True if any listener consumed the event, False otherwise.
        """
        for l in reversed(listeners):
            if getattr(l, function)(*args):
                return True
        return False

    def broadcastKeyEvent(self, function, *args):
        if not self.broadcastEvent(self.priorityKeyListeners, function, *args):
            return self.broadcastEvent(self.keyListeners, function, *args)
        return True

    def handleEvent(self, event):
        """
        Update the tracked state from one pygame event and dispatch it.

        Args:
            event (pygame.event.Event): The event to handle.
        """
        if event.type == pygame.KEYDOWN:
            self.pressedKeys.add(event.key)
            self.broadcastKeyEvent("keyPressed", event.key, getattr(event, "unicode", ""))
        elif event.type == pygame.KEYUP:
            self.pressedKeys.discard(event.key)
            self.broadcastKeyEvent("keyReleased", event.key)
        elif event.type == pygame.MOUSEMOTION:
            self.cursor = self.lastCursor = tuple(event.pos)
            self.broadcastEvent(self.mouseListeners, "mouseMoved", event.pos, event.rel)
        elif event.type == pygame.MOUSEWHEEL:
            self.scrollEvents.append(float(event.y))
            self.broadcastEvent(self.mouseListeners, "mouseWheel", float(event.y))
        elif event.type == pygame.WINDOWLEAVE:
            self.cursor = None
            self.broadcastEvent(self.mouseListeners, "mouseLeft")
        elif event.type == pygame.WINDOWENTER:
            self.cursor = self.lastCursor
        elif event.type in (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED):
            if event.type == pygame.VIDEORESIZE:
                size = tuple(event.size)
            else:
                size = (event.x, event.y)
            if size != self.windowSize:
                Log.debug("Window resized to %dx%d." % size)
                self.windowSize = size
                self.broadcastEvent(self.systemListeners, "screenResized", size)
        elif event.type == pygame.QUIT:
            self.broadcastEvent(self.systemListeners, "quit")

    def frameInput(self, delta, now):
        """
        Build the input snapshot for one frame.

        The scroll events collected so far are handed over to the snapshot
        and cleared, so every scroll event is seen by exactly one frame.

        Args:
            delta (float): Seconds since the previous frame.
            now (float): Monotonic clock time in seconds.

        Returns:
            FrameInput: The snapshot.
        """
        frame = FrameInput(delta, now, self.cursor, self.windowSize,
                           self.pressedKeys, self.scrollEvents)
        self.scrollEvents = []
        return frame

    def run(self, ticks):
        """
        Process all pending input events.

        Args:
            ticks: Frame timing information (unused, required by Task interface).
        """
        pygame.event.pump()
        for event in pygame.event.get():
            self.handleEvent(event)
