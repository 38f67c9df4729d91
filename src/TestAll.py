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
Test runner script for the RTS camera.

This module discovers and runs all unit tests in the project. It finds all
files matching the pattern '*Test.py' next to this script and executes
their test cases using Python's unittest framework.

Usage:
    python TestAll.py         Run all unit tests

The test runner loads the default configuration before executing tests and
reports results with verbose output.
"""

import sys
import os
import unittest
import Config

tests = []

here = os.path.dirname(os.path.abspath(__file__))
if here not in sys.path:
  sys.path.insert(0, here)

for root, dirs, files in os.walk(here):
  for f in sorted(files):
    if f.endswith("Test.py"):
      m = f.replace(".py", "")
      if root not in sys.path:
        sys.path.append(root)
      tests.append(__import__(m))

suite = unittest.TestSuite()
loader = unittest.defaultTestLoader

for test in tests:
  for item in dir(test):
    obj = test.__dict__.get(item)
    if item.endswith("Test") and isinstance(obj, type) and issubclass(obj, unittest.TestCase):
      suite.addTests(loader.loadTestsFromTestCase(obj))

Config.load(setAsDefault = True)
result = unittest.TextTestRunner(verbosity = 2).run(suite)
sys.exit(not result.wasSuccessful())
