# shapecanvas/utils.py
"""
Text report helpers for the canvas.
"""

REPORT_HEADER = "Canvas has the following random shapes:"


def format_shape_line(shape):
    """One report line: identifier then description."""
    return f"Shape {shape.get_id()}: {shape.get_info()}"


def format_report(shapes):
    """Header followed by one line per shape, in the given order."""
    lines = [REPORT_HEADER]
    for shp in shapes:
        lines.append(format_shape_line(shp))
    return lines
