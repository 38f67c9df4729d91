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
Camera and demo configuration.

Options are declared up front with define(), which records their type and
default in a prototype. A Config reads an optional INI file on top of the
prototype, so every declared option always has a value and get() hands it
back converted to the declared type:

    >>> define("pan", "max_speed", float, 5.0, text = "Maximum pan speed")
    >>> config = load("rtscamera.ini", setAsDefault = True)
    >>> get("pan", "max_speed")
    25.0

Nothing is ever written back to disk. set() overrides a value for the
rest of the session only.
"""

from configparser import ConfigParser
import Log
import Resource

encoding  = "utf-8"
config    = None
prototype = {}

TRUE_VALUES = ("1", "true", "yes", "on")

class Option:
  """A declared option: its type, default, description and valid values."""

  def __init__(self, **args):
    for key, value in list(args.items()):
      setattr(self, key, value)

def define(section, option, type, default = None, text = None, options = None, prototype = prototype):
  """Declare an option.

  Args:
      section: INI section, e.g. "zoom".
      option: Option name within the section, e.g. "scroll_accel".
      type: Value type; one of str, int, float or bool.
      default: Value used when the file does not set the option.
      text: Short description shown in logs and usage.
      options: Allowed values, as a list or as a dict of value -> label.
          Booleans get [True, False] when nothing is given.
      prototype: The prototype to declare into; the module-wide one by
          default.
  """
  declared = prototype.setdefault(section, {})

  if type == bool and not options:
    options = [True, False]

  declared[option] = Option(type = type, default = default, text = text, options = options)

def load(fileName = None, setAsDefault = False):
  """Read a configuration against the module-wide prototype.

  With setAsDefault the first loaded configuration also becomes the one
  behind the module level get() and set().
  """
  global config
  c = Config(prototype, fileName)
  if setAsDefault and not config:
    config = c
  return c

class Config:
  """Declared options overlaid with the values read from an INI file.

  Attributes:
      prototype: section -> option -> Option.
      config: The ConfigParser holding the current string values.
      fileName: The resolved file name, or None when only defaults are used.
  """

  def __init__(self, prototype, fileName = None):
    self.prototype = prototype
    self.config    = ConfigParser(interpolation = None)
    self.fileName  = None

    if fileName:
      self.fileName = Resource.resolveFileName(fileName)
      if self.config.read(self.fileName, encoding = encoding):
        Log.debug("Configuration read from %s." % self.fileName)
        self._checkUnknownOptions()
      else:
        Log.debug("No configuration file at %s, using defaults." % self.fileName)

    for section, options in list(prototype.items()):
      if not self.config.has_section(section):
        self.config.add_section(section)
      for option, definition in list(options.items()):
        if not self.config.has_option(section, option):
          self.config.set(section, option, str(definition.default))

  def _checkUnknownOptions(self):
    for section in self.config.sections():
      if section not in self.prototype:
        Log.warn("Unknown section [%s] in %s ignored." % (section, self.fileName))
        continue
      for option in self.config.options(section):
        if option not in self.prototype[section]:
          Log.warn("Unknown option [%s] %s in %s ignored." % (section, option, self.fileName))

  def _definition(self, section, option, action):
    try:
      return self.prototype[section][option]
    except KeyError:
      Log.warn("Config key %s.%s not defined while %s." % (section, option, action))
      return None

  def get(self, section, option):
    """Read a value converted to its declared type.

    Booleans are true for 1, true, yes and on in any case. Undeclared
    options are returned as strings, or None when they are not set
    either.
    """
    definition = self._definition(section, option, "reading")
    if definition is None:
      type, default = str, None
    else:
      type, default = definition.type, definition.default

    if self.config.has_option(section, option):
      value = self.config.get(section, option)
      if not value.strip() and type is not str and default is not None:
        value = default
    elif default is None:
      return None
    else:
      value = default

    if type == bool:
      return str(value).strip().lower() in TRUE_VALUES
    return type(value)

  def getRange(self, section, startOption, endOption):
    """Read two options as a (start, end) range tuple."""
    return (self.get(section, startOption), self.get(section, endOption))

  def set(self, section, option, value):
    """Override a value for the rest of the session. The file is left alone."""
    self._definition(section, option, "writing")

    if not self.config.has_section(section):
      self.config.add_section(section)

    self.config.set(section, option, str(value))

def get(section, option):
  """Read a value from the default configuration set up by load()."""
  return config.get(section, option)

def set(section, option, value):
  """Override a value in the default configuration."""
  config.set(section, option, value)
