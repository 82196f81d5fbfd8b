"""CSS color value checks shared by the config loader and the logo."""

from __future__ import annotations

import re

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.I)
FUNCTIONAL_COLOR_PATTERN = re.compile(
    r"^(?:rgb|rgba|hsl|hsla)\(\s*[+-]?[0-9.]*[0-9][0-9.%\s,/+-]*\)$", re.I
)

CSS_KEYWORD_COLORS = frozenset({"currentcolor", "transparent"})
CSS_NAMED_COLORS = frozenset(
    """
    aliceblue antiquewhite aqua aquamarine azure beige bisque black
    blanchedalmond blue blueviolet brown burlywood cadetblue chartreuse
    chocolate coral cornflowerblue cornsilk crimson cyan darkblue darkcyan
    darkgoldenrod darkgray darkgreen darkgrey darkkhaki darkmagenta
    darkolivegreen darkorange darkorchid darkred darksalmon darkseagreen
    darkslateblue darkslategray darkslategrey darkturquoise darkviolet
    deeppink deepskyblue dimgray dimgrey dodgerblue firebrick floralwhite
    forestgreen fuchsia gainsboro ghostwhite gold goldenrod gray green
    greenyellow grey honeydew hotpink indianred indigo ivory khaki lavender
    lavenderblush lawngreen lemonchiffon lightblue lightcoral lightcyan
    lightgoldenrodyellow lightgray lightgreen lightgrey lightpink lightsalmon
    lightseagreen lightskyblue lightslategray lightslategrey lightsteelblue
    lightyellow lime limegreen linen magenta maroon mediumaquamarine
    mediumblue mediumorchid mediumpurple mediumseagreen mediumslateblue
    mediumspringgreen mediumturquoise mediumvioletred midnightblue mintcream
    mistyrose moccasin navajowhite navy oldlace olive olivedrab orange
    orangered orchid palegoldenrod palegreen paleturquoise palevioletred
    papayawhip peachpuff peru pink plum powderblue purple rebeccapurple red
    rosybrown royalblue saddlebrown salmon sandybrown seagreen seashell sienna
    silver skyblue slateblue slategray slategrey snow springgreen steelblue
    tan teal thistle tomato turquoise violet wheat white whitesmoke yellow
    yellowgreen
    """.split()
)


def is_css_color(value: object) -> bool:
    """Return ``True`` when ``value`` is a CSS hex, functional, or named color.

    Examples
    --------
    >>> is_css_color("#fff")
    True
    >>> is_css_color("rebeccapurple")
    True
    >>> is_css_color("#ggg")
    False
    """
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not text:
        return False
    lowered = text.lower()
    if lowered in CSS_NAMED_COLORS or lowered in CSS_KEYWORD_COLORS:
        return True
    return bool(HEX_COLOR_PATTERN.match(text) or FUNCTIONAL_COLOR_PATTERN.match(text))


__all__ = ["CSS_NAMED_COLORS", "is_css_color"]
