"""
Channel naming rules shared by the image model and channel extraction.
"""

# family value standing for the image-standard R, G, B, A channels
DEFAULT_FAMILY = "default"
CANONICAL_CHANNELS = ("R", "G", "B", "A")

# component selectors, in the order offered to the user
COMPONENTS = ("r", "g", "b", "a", "x", "y", "z")
ALL_COMPONENTS = "all"


def channel_family(name: str) -> str:
    """
    Family of a channel name: everything before the last ``.`` suffix.

    >>> channel_family("ViewLayer.Combined.g")
    'ViewLayer.Combined'
    >>> channel_family("Z")
    'Z'
    """
    pos = name.rfind(".")
    if pos == -1:
        return name
    return name[:pos]


def uses_canonical_channels(channel_names, family: str) -> bool:
    """
    Whether ``family`` selects the bare R, G, B, A channels.

    True only for the default family of an image that has at least one of
    them. Otherwise a file's own ``default.*`` channels are the family.
    """
    return family == DEFAULT_FAMILY and any(n in CANONICAL_CHANNELS for n in channel_names)
