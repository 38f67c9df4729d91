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
Demo engine module.

This module contains the GameEngine class, which wires the RTS camera
into a pygame/OpenGL window:

- Video: OpenGL window and display management
- Input: Keyboard, mouse and scroll wheel tracking
- CameraController: Per-frame RTS camera update
- Scene: The cube field being looked at
- Configuration: Camera tuning and video settings

Typical usage:
    engine = GameEngine(config)
    while engine.run():
        pass
    engine.shutdown()
"""

import pygame

from Engine import Engine
from Video import Video
from Input import Input, KeyListener, SystemEventListener
from Camera import Camera
from CameraController import CameraController
from CameraSettings import ZoomSettings, PanSettings, TurnSettings
from RtsCamera import RtsCamera
from Scene import Scene
import Log
import Config

# define configuration keys
Config.define("engine", "highpriority", bool,  False)
Config.define("video",  "fullscreen",   bool,  False, text = "Fullscreen Mode",      options = {False: "No", True: "Yes"})
Config.define("video",  "multisamples", int,   8,     text = "Antialiasing Quality", options = {0: "None", 2: "2x", 4: "4x", 8: "8x"})
Config.define("video",  "resolution",   str,   "1280x720")
Config.define("video",  "fps",          int,   60,    text = "Frames per Second",    options = dict([(n, n) for n in range(1, 241)]))
Config.define("camera", "focus_x",      float, 50.0)
Config.define("camera", "focus_z",      float, 50.0)
Config.define("camera", "distance",     float, 100.0, text = "Initial zoom distance")

class ExitOnEscape(KeyListener):
  """
  A keyboard listener that quits the engine when Escape is pressed, and
  toggles fullscreen on Alt+Enter.
  """

  def __init__(self, engine):
    self.engine = engine
    self.altStatus = False

  def keyPressed(self, key, str):
    if key == pygame.K_ESCAPE:
      Log.notice("Escape pressed, quitting.")
      self.engine.quit()
      return True
    elif key == pygame.K_LALT:
      self.altStatus = True
    elif key == pygame.K_RETURN and self.altStatus:
      if not self.engine.video.toggleFullscreen():
        Log.error("Unable to toggle fullscreen mode.")
      return True

  def keyReleased(self, key):
    if key == pygame.K_LALT:
      self.altStatus = False

class SystemEventHandler(SystemEventListener):
  """
  A system event listener that handles window resizes and quit requests.
  """

  def __init__(self, engine):
    self.engine = engine

  def screenResized(self, size):
    self.engine.resizeScreen(size[0], size[1])

  def quit(self):
    self.engine.quit()

class GameEngine(Engine):
  """
  The demo engine: one RTS camera over a field of cubes.

  Attributes:
      config: Configuration manager.
      video: Video subsystem for display and OpenGL management.
      input: Input tracker.
      controller: The RTS camera controller task.
      rtsCamera: The RTS camera state.
      camera: The render camera driven by the RTS camera.
      scene: The scene being rendered.
  """

  def __init__(self, config=None):
    """Initialize the engine and all subsystems.

    Args:
        config: Optional Config instance. If None, defaults are used.
    """
    if not config:
      config = Config.load()

    self.config = config

    Engine.__init__(self, fps = self.config.get("video", "fps"))

    pygame.init()

    self.video = Video("RTS Camera")

    Log.debug("Initializing video.")
    width, height = [int(s) for s in self.config.get("video", "resolution").split("x")]
    fullscreen    = self.config.get("video", "fullscreen")
    multisamples  = self.config.get("video", "multisamples")
    self.video.setMode((width, height), fullscreen = fullscreen, multisamples = multisamples)

    if self.config.get("engine", "highpriority"):
      Log.debug("Enabling high priority timer.")
      self.timer.highPriority = True

    self.scene = Scene()
    self.input = Input(self.video.getSize(), self.video.getCursor())
    self.controller = CameraController(self.input, clock = lambda: self.timer.time)

    self.rtsCamera = RtsCamera(
      focus        = (self.config.get("camera", "focus_x"), 0.0, self.config.get("camera", "focus_z")),
      zoomDistance = self.config.get("camera", "distance"),
    )
    self.camera = Camera()
    zoom = ZoomSettings.fromConfig(self.config)
    self.controller.addCamera(self.rtsCamera, self.camera,
                              zoom = zoom,
                              pan  = PanSettings.fromConfig(self.config),
                              turn = TurnSettings.fromConfig(self.config))

    self.addTask(self.input, synchronized = False)
    self.addTask(self.controller)

    self.input.addKeyListener(ExitOnEscape(self), priority = True)
    self.input.addSystemEventListener(SystemEventHandler(self))

    self.resizeScreen(*self.video.getSize())

    Log.debug("Ready.")

  def resizeScreen(self, width, height):
    """Update the projection after a window resize."""
    self.scene.setProjection(width, height)

  def shutdown(self):
    """Stop all tasks and close the display."""
    if self.running:
      Engine.quit(self)
    pygame.quit()

  def run(self):
    """Execute one iteration of the main loop.

    Returns:
        True if engine should continue running, False to quit.
    """
    if not Engine.run(self) or not self.running:
      return False
    self.scene.render(self.camera)
    self.video.flip()
    return True
