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
Resource path module.

Locates the platform-specific directory where the application keeps its
writable files: the log file and the optional user configuration file.
"""

import os

import Version

def getWritableResourcePath():
  """
  Get the platform-specific writable resource path.

  Returns the path to a directory where the application can store
  configuration files and logs. On POSIX systems, this is
  ~/.appname; on Windows, it's in APPDATA. Falls back to the current
  directory when neither is available.

  Returns:
      str: The path to the writable resource directory. The directory
          is created if it doesn't exist.
  """
  path = "."
  appname = Version.appName()
  if os.name == "posix":
    path = os.path.expanduser("~/." + appname)
  elif os.name == "nt":
    try:
      path = os.path.join(os.environ["APPDATA"], appname)
    except KeyError:
      pass
  try:
    os.makedirs(path, exist_ok = True)
  except OSError:
    path = "."
  return path


def resolveFileName(fileName):
  """
  Resolve a file name against the writable resource path.

  Names that exist relative to the working directory are returned as-is,
  anything else is looked up in the writable resource directory.

  Args:
      fileName: A file name or path.

  Returns:
      str: The resolved path. The file itself may not exist.
  """
  if os.path.isfile(fileName):
    return fileName
  return os.path.join(getWritableResourcePath(), fileName)
