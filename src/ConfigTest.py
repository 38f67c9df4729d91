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

import os
import tempfile
import unittest

import Config


class ConfigTest(unittest.TestCase):
  def setUp(self):
    self.prototype = {}
    Config.define("camera", "distance",   float, 100.0, text = "Initial distance", prototype = self.prototype)
    Config.define("video",  "fps",        int,   60,                               prototype = self.prototype)
    Config.define("video",  "fullscreen", bool,  False,                            prototype = self.prototype)
    Config.define("video",  "resolution", str,   "1280x720",                       prototype = self.prototype)

  def writeConfig(self, text):
    fd, fileName = tempfile.mkstemp(suffix = ".ini")
    with os.fdopen(fd, "w") as f:
      f.write(text)
    self.addCleanup(os.remove, fileName)
    return fileName

  def testDefine(self):
    option = self.prototype["video"]["fullscreen"]
    self.assertEqual(option.type, bool)
    self.assertEqual(option.default, False)
    self.assertEqual(option.options, [True, False])
    self.assertEqual(self.prototype["camera"]["distance"].text, "Initial distance")

  def testDefaults(self):
    config = Config.Config(self.prototype)
    self.assertEqual(config.get("camera", "distance"), 100.0)
    self.assertEqual(config.get("video", "fps"), 60)
    self.assertEqual(config.get("video", "fullscreen"), False)
    self.assertEqual(config.get("video", "resolution"), "1280x720")

  def testLoading(self):
    fileName = self.writeConfig("[camera]\ndistance = 42.5\n[video]\nfps = 30\nfullscreen = yes\n")
    config = Config.Config(self.prototype, fileName)
    self.assertEqual(config.fileName, fileName)
    self.assertEqual(config.get("camera", "distance"), 42.5)
    self.assertEqual(config.get("video", "fps"), 30)
    self.assertEqual(config.get("video", "fullscreen"), True)
    self.assertEqual(config.get("video", "resolution"), "1280x720")

  def testBooleanSpellings(self):
    config = Config.Config(self.prototype)
    for value in ("1", "true", "Yes", "ON", True):
      config.set("video", "fullscreen", value)
      self.assertEqual(config.get("video", "fullscreen"), True)
    for value in ("0", "false", "no", "off", "maybe", False):
      config.set("video", "fullscreen", value)
      self.assertEqual(config.get("video", "fullscreen"), False)

  def testMissingFileUsesDefaults(self):
    config = Config.Config(self.prototype, os.path.join(tempfile.gettempdir(), "no-such-dir", "missing.ini"))
    self.assertEqual(config.get("video", "fps"), 60)

  def testSetIsNotWrittenToDisk(self):
    fileName = self.writeConfig("[video]\nfps = 30\n")
    config = Config.Config(self.prototype, fileName)
    config.set("video", "fps", 120)
    self.assertEqual(config.get("video", "fps"), 120)

    with open(fileName) as f:
      self.assertEqual(f.read(), "[video]\nfps = 30\n")
    self.assertEqual(Config.Config(self.prototype, fileName).get("video", "fps"), 30)

  def testGetRange(self):
    Config.define("camera", "min_distance", float, 5.0,   prototype = self.prototype)
    Config.define("camera", "max_distance", float, 100.0, prototype = self.prototype)
    fileName = self.writeConfig("[camera]\nmin_distance = 25\n")
    config = Config.Config(self.prototype, fileName)
    self.assertEqual(config.getRange("camera", "min_distance", "max_distance"), (25.0, 100.0))

  def testEmptyValueFallsBackToDefault(self):
    fileName = self.writeConfig("[video]\nfps =\nresolution =\n")
    config = Config.Config(self.prototype, fileName)
    self.assertEqual(config.get("video", "fps"), 60)
    self.assertEqual(config.get("video", "resolution"), "")

  def testUnknownOptionsInFileAreIgnored(self):
    fileName = self.writeConfig("[video]\nfsp = 30\n[sound]\nvolume = 1\n")
    config = Config.Config(self.prototype, fileName)
    self.assertEqual(config.get("video", "fps"), 60)

  def testUndefinedKeys(self):
    config = Config.Config(self.prototype)
    config.set("extra", "name", 5)
    self.assertEqual(config.get("extra", "name"), "5")


if __name__ == "__main__":
  unittest.main()
