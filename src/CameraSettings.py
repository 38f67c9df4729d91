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
Camera settings module.

This module defines the three immutable configuration records that
parameterize the RTS camera update: ZoomSettings, PanSettings and
TurnSettings. Every field has a default, so a camera that does not
customize a record can use a default-constructed one.

Records can be shared by any number of cameras. They are frozen once
constructed; use replace() to derive a customized copy:

    >>> zoom = ZoomSettings(scrollAccel = 10.0, maxVelocity = 50.0)
    >>> closeZoom = zoom.replace(distanceRange = (25.0, 100.0))

Ranges are (start, end) tuples and key bindings are tuples of pygame key
codes. Ranges are not validated: an inverted or empty range is undefined
behavior and the caller is responsible for sane values.

Each record can also be read from the [zoom], [pan] and [turn] sections
of a Config. Key bindings there are comma separated pygame key constant
names or integer key codes, e.g. "K_LEFT, K_a".
"""

import math

import pygame

import Config
import Log

TAU = 2.0 * math.pi


def keyCode(name):
    """
    Convert a configured key name to a pygame key code.

    Args:
        name (str): A pygame constant name such as 'K_LEFT' or an integer.

    Returns:
        int: The key code, or None if the name is not known.
    """
    name = name.strip()
    try:
        return int(name)
    except ValueError:
        pass
    code = getattr(pygame, name, None)
    if isinstance(code, int) and name.startswith("K_"):
        return code
    return None


def parseKeys(value, section = "", option = ""):
    """
    Parse a comma separated list of key names into a tuple of key codes.

    Unknown names are logged and skipped.
    """
    keys = []
    for name in value.split(","):
        if not name.strip():
            continue
        code = keyCode(name)
        if code is None:
            Log.warn("Unknown key name %s in [%s] %s." % (name.strip(), section, option))
            continue
        keys.append(code)
    return tuple(keys)


class Settings(object):
    """
    Base class for immutable settings records.

    Subclasses list their fields and defaults in the `defaults` dict.
    Keyword arguments to the constructor override the defaults; unknown
    keywords raise TypeError.
    """

    defaults = {}

    def __init__(self, **kwargs):
        unknown = [k for k in kwargs if k not in self.defaults]
        if unknown:
            raise TypeError("%s got unexpected settings: %s" % (self.__class__.__name__, ", ".join(sorted(unknown))))
        for name, default in self.defaults.items():
            value = kwargs.get(name, default)
            if isinstance(value, list):
                value = tuple(value)
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def __delattr__(self, name):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.asDict() == other.asDict()

    def __hash__(self):
        return hash(tuple(sorted(self.asDict().items())))

    def __repr__(self):
        fields = ", ".join("%s=%r" % (name, value) for name, value in self.asDict().items())
        return "%s(%s)" % (self.__class__.__name__, fields)

    def asDict(self):
        return dict((name, getattr(self, name)) for name in self.defaults)

    def replace(self, **changes):
        """Return a copy with the given fields changed."""
        values = self.asDict()
        values.update(changes)
        return self.__class__(**values)


class ZoomSettings(Settings):
    """
    Zoom parameters.

    Attributes:
        angleRange (tuple): The minimum and maximum pitch in radians from the
            target.
        angleChangeZone (tuple): The distance zone inside which the pitch
            changes. At the start of the zone the pitch is the minimum angle,
            at the end it is the maximum; outside the zone the camera only
            zooms.
        distanceRange (tuple): The minimum and maximum distance from the
            target.
        maxVelocity (float): Upper cap on the zoom velocity. There is no
            lower cap, so zooming in is not speed-limited.
        scrollAccel (float): Change in zoom velocity per line scrolled.
            Scroll events arrive as discrete ticks, so this is not scaled by
            the frame time.
        keyboardAccel (float): Zoom acceleration while a zoom key is held.
        idleDeceleration (float): Deceleration while nothing drives the zoom.
        zoomInKeys (tuple): Keys which zoom in.
        zoomOutKeys (tuple): Keys which zoom out.
    """

    defaults = {
        "angleRange":       (0.5705693, 1.1637539),
        "angleChangeZone":  (5.0, 100.0),
        "distanceRange":    (5.0, 100.0),
        "maxVelocity":      5.0,
        "scrollAccel":      5.0,
        "keyboardAccel":    5.0,
        "idleDeceleration": 5.0,
        "zoomInKeys":       (pygame.K_EQUALS, pygame.K_KP_PLUS),
        "zoomOutKeys":      (pygame.K_KP_MINUS, pygame.K_MINUS),
    }

    @classmethod
    def fromConfig(cls, config):
        return cls(
            angleRange       = config.getRange("zoom", "min_angle", "max_angle"),
            angleChangeZone  = config.getRange("zoom", "angle_zone_start", "angle_zone_end"),
            distanceRange    = config.getRange("zoom", "min_distance", "max_distance"),
            maxVelocity      = config.get("zoom", "max_velocity"),
            scrollAccel      = config.get("zoom", "scroll_accel"),
            keyboardAccel    = config.get("zoom", "keyboard_accel"),
            idleDeceleration = config.get("zoom", "idle_deceleration"),
            zoomInKeys       = parseKeys(config.get("zoom", "zoom_in_keys"), "zoom", "zoom_in_keys"),
            zoomOutKeys      = parseKeys(config.get("zoom", "zoom_out_keys"), "zoom", "zoom_out_keys"),
        )


class PanSettings(Settings):
    """
    Pan parameters.

    Attributes:
        mouseAccel (float): Pan acceleration while the cursor is at an edge.
        mouseAccelMargin (float): Distance in pixels from the window edge
            within which the cursor starts panning.
        keyboardAccel (float): Pan acceleration while a pan key is held.
        maxSpeed (float): Maximum length of the pan velocity.
        idleDeceleration (float): Deceleration of each pan axis while nothing
            drives it.
        panSpeedZoomFactorRange (tuple): Pan speed factor at the start and
            end of the zoom's angle range, interpolated by zoom distance.
        leftKeys, rightKeys, upKeys, downKeys (tuple): Pan key bindings.
    """

    defaults = {
        "mouseAccel":              15.0,
        "mouseAccelMargin":        10.0,
        "keyboardAccel":           5.0,
        "maxSpeed":                5.0,
        "idleDeceleration":        17.5,
        "panSpeedZoomFactorRange": (1.0, 2.0),
        "leftKeys":                (pygame.K_LEFT, pygame.K_a),
        "rightKeys":               (pygame.K_RIGHT, pygame.K_d),
        "upKeys":                  (pygame.K_UP, pygame.K_w),
        "downKeys":                (pygame.K_DOWN, pygame.K_s),
    }

    @classmethod
    def fromConfig(cls, config):
        return cls(
            mouseAccel              = config.get("pan", "mouse_accel"),
            mouseAccelMargin        = config.get("pan", "mouse_accel_margin"),
            keyboardAccel           = config.get("pan", "keyboard_accel"),
            maxSpeed                = config.get("pan", "max_speed"),
            idleDeceleration        = config.get("pan", "idle_deceleration"),
            panSpeedZoomFactorRange = config.getRange("pan", "min_zoom_factor", "max_zoom_factor"),
            leftKeys                = parseKeys(config.get("pan", "left_keys"), "pan", "left_keys"),
            rightKeys               = parseKeys(config.get("pan", "right_keys"), "pan", "right_keys"),
            upKeys                  = parseKeys(config.get("pan", "up_keys"), "pan", "up_keys"),
            downKeys                = parseKeys(config.get("pan", "down_keys"), "pan", "down_keys"),
        )


class TurnSettings(Settings):
    """
    Turn (yaw) parameters.

    Attributes:
        mouseTurnMargin (float): Height of the band at the top of the window,
            as a fraction of the window height, in which an edge cursor turns
            instead of panning.
        yawRange (tuple): Allowed yaw in radians.
        mouseAccel (float): Turn acceleration from the cursor, rad/s^2.
        keyboardAccel (float): Turn acceleration from the keyboard, rad/s^2.
        maxSpeed (float): Maximum absolute turn velocity, rad/s.
        idleDeceleration (float): Deceleration while nothing drives the turn.
        leftKeys, rightKeys (tuple): Turn key bindings.
    """

    defaults = {
        "mouseTurnMargin":  0.25,
        "yawRange":         (0.0, TAU),
        "mouseAccel":       0.3,
        "keyboardAccel":    1.8,
        "maxSpeed":         1.5,
        "idleDeceleration": 5.0,
        "leftKeys":         (pygame.K_q,),
        "rightKeys":        (pygame.K_e,),
    }

    @classmethod
    def fromConfig(cls, config):
        return cls(
            mouseTurnMargin  = config.get("turn", "mouse_turn_margin"),
            yawRange         = config.getRange("turn", "min_yaw", "max_yaw"),
            mouseAccel       = config.get("turn", "mouse_accel"),
            keyboardAccel    = config.get("turn", "keyboard_accel"),
            maxSpeed         = config.get("turn", "max_speed"),
            idleDeceleration = config.get("turn", "idle_deceleration"),
            leftKeys         = parseKeys(config.get("turn", "left_keys"), "turn", "left_keys"),
            rightKeys        = parseKeys(config.get("turn", "right_keys"), "turn", "right_keys"),
        )


# define configuration keys
_zoom, _pan, _turn = ZoomSettings.defaults, PanSettings.defaults, TurnSettings.defaults

Config.define("zoom", "min_angle",          float, _zoom["angleRange"][0],       text = "Pitch at the near end of the angle zone")
Config.define("zoom", "max_angle",          float, _zoom["angleRange"][1],       text = "Pitch at the far end of the angle zone")
Config.define("zoom", "angle_zone_start",   float, _zoom["angleChangeZone"][0])
Config.define("zoom", "angle_zone_end",     float, _zoom["angleChangeZone"][1])
Config.define("zoom", "min_distance",       float, _zoom["distanceRange"][0],    text = "Closest zoom distance")
Config.define("zoom", "max_distance",       float, _zoom["distanceRange"][1],    text = "Furthest zoom distance")
Config.define("zoom", "max_velocity",       float, _zoom["maxVelocity"])
Config.define("zoom", "scroll_accel",       float, _zoom["scrollAccel"],         text = "Zoom speed per scroll tick")
Config.define("zoom", "keyboard_accel",     float, _zoom["keyboardAccel"])
Config.define("zoom", "idle_deceleration",  float, _zoom["idleDeceleration"])
Config.define("zoom", "zoom_in_keys",       str,   "K_EQUALS, K_KP_PLUS",       text = "Zoom in")
Config.define("zoom", "zoom_out_keys",      str,   "K_KP_MINUS, K_MINUS",       text = "Zoom out")

Config.define("pan",  "mouse_accel",        float, _pan["mouseAccel"])
Config.define("pan",  "mouse_accel_margin", float, _pan["mouseAccelMargin"],     text = "Edge scrolling margin in pixels")
Config.define("pan",  "keyboard_accel",     float, _pan["keyboardAccel"])
Config.define("pan",  "max_speed",          float, _pan["maxSpeed"],             text = "Maximum pan speed")
Config.define("pan",  "idle_deceleration",  float, _pan["idleDeceleration"])
Config.define("pan",  "min_zoom_factor",    float, _pan["panSpeedZoomFactorRange"][0])
Config.define("pan",  "max_zoom_factor",    float, _pan["panSpeedZoomFactorRange"][1])
Config.define("pan",  "left_keys",          str,   "K_LEFT, K_a",               text = "Pan left")
Config.define("pan",  "right_keys",         str,   "K_RIGHT, K_d",              text = "Pan right")
Config.define("pan",  "up_keys",            str,   "K_UP, K_w",                 text = "Pan up")
Config.define("pan",  "down_keys",          str,   "K_DOWN, K_s",               text = "Pan down")

Config.define("turn", "mouse_turn_margin",  float, _turn["mouseTurnMargin"],     text = "Edge turning band as a fraction of the window height")
Config.define("turn", "min_yaw",            float, _turn["yawRange"][0])
Config.define("turn", "max_yaw",            float, _turn["yawRange"][1])
Config.define("turn", "mouse_accel",        float, _turn["mouseAccel"])
Config.define("turn", "keyboard_accel",     float, _turn["keyboardAccel"])
Config.define("turn", "max_speed",          float, _turn["maxSpeed"])
Config.define("turn", "idle_deceleration",  float, _turn["idleDeceleration"])
Config.define("turn", "left_keys",          str,   "K_q",                       text = "Turn left")
Config.define("turn", "right_keys",         str,   "K_e",                       text = "Turn right")
