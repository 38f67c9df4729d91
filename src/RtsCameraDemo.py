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
RTS Camera Demo - Main Entry Point
==================================

Opens a window over a field of cubes with an RTS camera attached.

Usage:
    python RtsCameraDemo.py [options]

Options:
    -v, --verbose         Enable verbose logging output
    -c, --config FILE     Read camera and video settings from FILE

Controls:
    W/A/S/D, arrows   Pan
    Q/E               Turn
    +/-, wheel        Zoom
    Window edges      Pan; turn along the top quarter of the side edges
    Escape            Quit
"""
import sys
import getopt

from GameEngine import GameEngine
import Log
import Config
import Version

# Command-line usage information
USAGE = """
RTS Camera Demo %(version)s

Usage: %(prog)s [options]

Options:
  -v, --verbose         Enable verbose logging
  -c, --config FILE     Configuration file (default: %(config)s)
  -h, --help            Show this help message
""" % {"prog": sys.argv[0], "version": Version.version(), "config": Version.configFileName()}


def parse_arguments(argv):
    """
    Parse command-line arguments.

    Returns:
        tuple: (configFile, verbose)
    """
    try:
        opts, args = getopt.getopt(argv, "vc:h", ["verbose", "config=", "help"])
    except getopt.GetoptError:
        print(USAGE)
        sys.exit(1)

    configFile = Version.configFileName()
    verbose = False

    for opt, arg in opts:
        if opt in ["--verbose", "-v"]:
            verbose = True
        elif opt in ["--config", "-c"]:
            configFile = arg
        elif opt in ["--help", "-h"]:
            print(USAGE)
            sys.exit(0)

    return configFile, verbose


def main():
    """
    Main entry point: load the configuration and run the demo loop.
    """
    configFile, verbose = parse_arguments(sys.argv[1:])

    if verbose:
        Log.quiet = False

    config = Config.load(configFile, setAsDefault=True)
    engine = GameEngine(config)

    try:
        while engine.run():
            pass
    except KeyboardInterrupt:
        Log.notice("Interrupted by user.")

    engine.shutdown()


if __name__ == "__main__":
    main()
