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
Version information module for the RTS camera.

This module provides version identification and application metadata
used by the logging and configuration layers. The application name
determines the writable resource directory and the default names of
the log and configuration files.

Module Constants:
    VERSION: The major.minor.patch version string (e.g., '0.2.0').

Usage:
    import Version
    print(Version.version())   # e.g., '0.2.0'
    print(Version.appName())   # 'rtscamera'
"""

VERSION = '0.2.0'

def appName():
  """
  Get the application's internal name.

  Used for configuration file naming, log files, and user data directories.

  Returns:
      str: The application name ('rtscamera').
  """
  return "rtscamera"


def version():
  """
  Get the full version string.

  Returns:
      str: The full version string (e.g., '0.2.0').
  """
  return VERSION


def configFileName():
  """
  Get the default configuration file name.

  Returns:
      str: The INI file name looked up in the writable resource path.
  """
  return appName() + ".ini"
