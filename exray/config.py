"""
Global configuration dictionary and default parameters used across EXRay.

Stores the color-management config location, the pipeline colorspaces,
the initial channel selection and the grading parameters shared by the
interface and UI modules.
"""

import os

con_dict = {
    # OpenColorIO config file, or a built-in ocio:// URI
    "ocio_config": os.environ.get("OCIO", "ocio://default"),

    # pipeline colorspaces
    "working_space": "ACEScg",
    "input_colorspace": "Linear Rec.709 (sRGB)",
    "display_colorspace": "sRGB - Display",

    # initial channel selection
    "default_family": "default",
    "default_component": "all",

    # grading
    "exposure": 0.0,
    "gamma": 1.0,
}


def set_value(key, value):
    if key not in con_dict:
        raise KeyError(key)
    # naive cast
    ty = type(con_dict[key])
    con_dict[key] = ty(value)


def get_all():
    return con_dict
