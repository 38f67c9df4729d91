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
Log for the RTS camera and its demo host.

Every message goes to rtscamera.log in the writable resource directory,
stamped with the seconds since start-up. Messages are echoed to the
console too when the program runs with -v or --verbose, or when a host
clears `quiet` itself. Console labels are colored on POSIX terminals.

The per-frame camera update never logs. Input, configuration, the camera
controller and the demo host do:

    >>> import Log
    >>> Log.debug("Camera controller started with 1 camera(s).")
    >>> Log.warn("Unknown key name K_FOO in [pan] left_keys.")
"""

import sys
import os
import time
import Resource
import Version

quiet = not ("-v" in sys.argv or "--verbose" in sys.argv)
startTime = time.monotonic()
logFile = open(os.path.join(Resource.getWritableResourcePath(), Version.appName() + ".log"), "w", encoding = "utf-8")

if os.name == "posix":
  labels = {
    "warn":   "\033[1;33m(W)\033[0m",
    "debug":  "\033[1;34m(D)\033[0m",
    "notice": "\033[1;32m(N)\033[0m",
    "error":  "\033[1;31m(E)\033[0m",
  }
else:
  labels = {
    "warn":   "(W)",
    "debug":  "(D)",
    "notice": "(N)",
    "error":  "(E)",
  }

plainLabels = {
  "warn":   "(W)",
  "debug":  "(D)",
  "notice": "(N)",
  "error":  "(E)",
}

def log(cls, msg):
  """Write one message.

  Args:
      cls: 'debug', 'notice', 'warn' or 'error'.
      msg: The message; anything printable.
  """
  msg = str(msg)
  if not quiet:
    print(labels[cls] + " " + msg)
  print("[%9.3f] %s %s" % (time.monotonic() - startTime, plainLabels[cls], msg), file = logFile)
  logFile.flush()


def warn(msg):
  log("warn", msg)


def debug(msg):
  log("debug", msg)


def notice(msg):
  log("notice", msg)


def error(msg):
  log("error", msg)
