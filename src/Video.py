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
Video display initialization module.

This module provides the Video class for creating the pygame window with
an OpenGL context the demo renders into, and for reading back the window
and cursor state the camera input starts from.
"""

import pygame
from OpenGL.GL import glEnable
from OpenGL.GL.ARB.multisample import GL_MULTISAMPLE_ARB
import Log


class Video:
  """Manages the display window and OpenGL rendering context.

  Attributes:
      screen: The pygame display surface, or None if not initialized.
      caption: The window title string displayed in the title bar.
      fullscreen: Boolean indicating whether fullscreen mode is active.
      flags: The pygame display flags used for the current video mode.
  """

  def __init__(self, caption="RTS Camera"):
    self.screen     = None
    self.caption    = caption
    self.fullscreen = False
    self.flags      = 0

  def setMode(self, resolution, fullscreen=False, flags=pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE,
              multisamples=0):
    """Set the video display mode with OpenGL context.

    Args:
        resolution: A tuple (width, height) specifying the display resolution.
        fullscreen: If True, enable fullscreen mode. Defaults to False.
        flags: Pygame display flags. Defaults to a resizable double-buffered OpenGL window.
        multisamples: Number of samples for antialiasing (0 to disable).

    Returns:
        bool: True if the display was successfully created, False otherwise.

    Raises:
        pygame.error: If video setup fails even without multisampling.
    """
    if fullscreen:
      flags |= pygame.FULLSCREEN

    self.flags      = flags
    self.fullscreen = fullscreen

    pygame.display.init()

    pygame.display.gl_set_attribute(pygame.GL_RED_SIZE,   8)
    pygame.display.gl_set_attribute(pygame.GL_GREEN_SIZE, 8)
    pygame.display.gl_set_attribute(pygame.GL_BLUE_SIZE,  8)
    pygame.display.gl_set_attribute(pygame.GL_DEPTH_SIZE, 24)

    if multisamples:
      pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLEBUFFERS, 1)
      pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLESAMPLES, multisamples)

    try:
      self.screen = pygame.display.set_mode(resolution, flags)
    except pygame.error as e:
      Log.error(str(e))
      if multisamples:
        Log.warn("Video setup failed. Trying without antialiasing.")
        pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLEBUFFERS, 0)
        pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLESAMPLES, 0)
        multisamples = 0
        self.screen = pygame.display.set_mode(resolution, flags)
      else:
        Log.error("Video setup failed. Make sure your graphics card supports OpenGL.")
        raise

    pygame.display.set_caption(self.caption)
    pygame.mouse.set_visible(True)

    if multisamples:
      glEnable(GL_MULTISAMPLE_ARB)

    Log.debug("Video mode %dx%d set." % self.getSize())
    return bool(self.screen)

  def getSize(self):
    """Get the (width, height) of the window in pixels."""
    return pygame.display.get_surface().get_size()

  def getCursor(self):
    """Get the cursor position, or None if the cursor is not over the window."""
    if not pygame.mouse.get_focused():
      return None
    return pygame.mouse.get_pos()

  def toggleFullscreen(self):
    """Toggle between fullscreen and windowed display modes."""
    assert self.screen

    return pygame.display.toggle_fullscreen()

  def flip(self):
    """Swap the front and back display buffers."""
    pygame.display.flip()
