"""X11 color names accepted wherever a color value is expected."""

from __future__ import annotations

_BASE_NAMES = """
aliceblue antiquewhite aqua aquamarine azure beige bisque black blanchedalmond
blue blueviolet brown burlywood cadetblue chartreuse chocolate coral
cornflowerblue cornsilk crimson cyan darkblue darkcyan darkgoldenrod darkgray
darkgreen darkgrey darkkhaki darkmagenta darkolivegreen darkorange darkorchid
darkred darksalmon darkseagreen darkslateblue darkslategray darkslategrey
darkturquoise darkviolet deeppink deepskyblue dimgray dimgrey dodgerblue
firebrick floralwhite forestgreen fuchsia gainsboro ghostwhite gold goldenrod
gray green greenyellow grey honeydew hotpink indianred indigo ivory khaki
lavender lavenderblush lawngreen lemonchiffon lightblue lightcoral lightcyan
lightgoldenrod lightgoldenrodyellow lightgray lightgreen lightgrey lightpink
lightsalmon lightseagreen lightskyblue lightslateblue lightslategray
lightslategrey lightsteelblue lightyellow lime limegreen linen magenta maroon
mediumaquamarine mediumblue mediumorchid mediumpurple mediumseagreen
mediumslateblue mediumspringgreen mediumturquoise mediumvioletred midnightblue
mintcream mistyrose moccasin navajowhite navy navyblue oldlace olive olivedrab
orange orangered orchid palegoldenrod palegreen paleturquoise palevioletred
papayawhip peachpuff peru pink plum powderblue purple rebeccapurple red
rosybrown royalblue saddlebrown salmon sandybrown seagreen seashell sienna
silver skyblue slateblue slategray slategrey snow springgreen steelblue tan
teal thistle tomato turquoise violet violetred webgray webgreen webgrey
webmaroon webpurple wheat white whitesmoke x11gray x11green x11grey x11maroon
x11purple yellow yellowgreen
"""

# Names that rgb.txt also lists with 1-4 suffixes (e.g. "red3").
_NUMBERED_NAMES = """
antiquewhite aquamarine azure bisque blue brown burlywood cadetblue chartreuse
chocolate coral cornsilk cyan darkgoldenrod darkolivegreen darkorange
darkorchid darkseagreen darkslategray deeppink deepskyblue dodgerblue firebrick
gold goldenrod green honeydew hotpink indianred ivory khaki lavenderblush
lemonchiffon lightblue lightcyan lightgoldenrod lightpink lightsalmon
lightskyblue lightsteelblue lightyellow magenta maroon mediumorchid
mediumpurple mistyrose navajowhite olivedrab orange orangered orchid palegreen
paleturquoise palevioletred peachpuff pink plum purple red rosybrown royalblue
salmon seagreen seashell sienna skyblue slateblue slategray snow springgreen
steelblue tan thistle tomato turquoise violetred wheat yellow
"""

X11_COLOR_NAMES: frozenset[str] = frozenset(
    _BASE_NAMES.split()
    + [f"{name}{n}" for name in _NUMBERED_NAMES.split() for n in range(1, 5)]
    + [f"{shade}{n}" for shade in ("gray", "grey") for n in range(101)]
)


def is_color_name(text: str) -> bool:
    """True for an X11 color name; case and inner spaces are ignored ("Dark Slate Gray")."""
    return text.replace(" ", "").lower() in X11_COLOR_NAMES
