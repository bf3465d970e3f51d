"""Named colour dataset and nearest-name lookup.

The bundled dataset is the CSS Color Module Level 4 named colour list.
Any other {name: '#rrggbb'} mapping can be swapped in, e.g. the
color-name-list JSON loaded with load_names().
"""

import json
from pathlib import Path

import numpy as np

from colour_scheme.core.codec import hex_to_rgb, normalize
from colour_scheme.core.errors import InvalidFormat
from colour_scheme.core.types import ColourInput, NearestMatch

NOT_FOUND = 'Not Found'

# Order matters: on duplicate values (aqua/cyan, gray/grey) the first name wins.
CSS_COLOURS: dict[str, str] = {
    'black': '#000000',
    'white': '#ffffff',
    'red': '#ff0000',
    'lime': '#00ff00',
    'blue': '#0000ff',
    'yellow': '#ffff00',
    'aqua': '#00ffff',
    'cyan': '#00ffff',
    'fuchsia': '#ff00ff',
    'magenta': '#ff00ff',
    'silver': '#c0c0c0',
    'gray': '#808080',
    'grey': '#808080',
    'maroon': '#800000',
    'olive': '#808000',
    'green': '#008000',
    'purple': '#800080',
    'teal': '#008080',
    'navy': '#000080',
    'aliceblue': '#f0f8ff',
    'antiquewhite': '#faebd7',
    'aquamarine': '#7fffd4',
    'azure': '#f0ffff',
    'beige': '#f5f5dc',
    'bisque': '#ffe4c4',
    'blanchedalmond': '#ffebcd',
    'blueviolet': '#8a2be2',
    'brown': '#a52a2a',
    'burlywood': '#deb887',
    'cadetblue': '#5f9ea0',
    'chartreuse': '#7fff00',
    'chocolate': '#d2691e',
    'coral': '#ff7f50',
    'cornflowerblue': '#6495ed',
    'cornsilk': '#fff8dc',
    'crimson': '#dc143c',
    'darkblue': '#00008b',
    'darkcyan': '#008b8b',
    'darkgoldenrod': '#b8860b',
    'darkgray': '#a9a9a9',
    'darkgreen': '#006400',
    'darkkhaki': '#bdb76b',
    'darkmagenta': '#8b008b',
    'darkolivegreen': '#556b2f',
    'darkorange': '#ff8c00',
    'darkorchid': '#9932cc',
    'darkred': '#8b0000',
    'darksalmon': '#e9967a',
    'darkseagreen': '#8fbc8f',
    'darkslateblue': '#483d8b',
    'darkslategray': '#2f4f4f',
    'darkturquoise': '#00ced1',
    'darkviolet': '#9400d3',
    'deeppink': '#ff1493',
    'deepskyblue': '#00bfff',
    'dimgray': '#696969',
    'dodgerblue': '#1e90ff',
    'firebrick': '#b22222',
    'floralwhite': '#fffaf0',
    'forestgreen': '#228b22',
    'gainsboro': '#dcdcdc',
    'ghostwhite': '#f8f8ff',
    'gold': '#ffd700',
    'goldenrod': '#daa520',
    'greenyellow': '#adff2f',
    'honeydew': '#f0fff0',
    'hotpink': '#ff69b4',
    'indianred': '#cd5c5c',
    'indigo': '#4b0082',
    'ivory': '#fffff0',
    'khaki': '#f0e68c',
    'lavender': '#e6e6fa',
    'lavenderblush': '#fff0f5',
    'lawngreen': '#7cfc00',
    'lemonchiffon': '#fffacd',
    'lightblue': '#add8e6',
    'lightcoral': '#f08080',
    'lightcyan': '#e0ffff',
    'lightgoldenrodyellow': '#fafad2',
    'lightgray': '#d3d3d3',
    'lightgreen': '#90ee90',
    'lightpink': '#ffb6c1',
    'lightsalmon': '#ffa07a',
    'lightseagreen': '#20b2aa',
    'lightskyblue': '#87cefa',
    'lightslategray': '#778899',
    'lightsteelblue': '#b0c4de',
    'lightyellow': '#ffffe0',
    'limegreen': '#32cd32',
    'linen': '#faf0e6',
    'mediumaquamarine': '#66cdaa',
    'mediumblue': '#0000cd',
    'mediumorchid': '#ba55d3',
    'mediumpurple': '#9370db',
    'mediumseagreen': '#3cb371',
    'mediumslateblue': '#7b68ee',
    'mediumspringgreen': '#00fa9a',
    'mediumturquoise': '#48d1cc',
    'mediumvioletred': '#c71585',
    'midnightblue': '#191970',
    'mintcream': '#f5fffa',
    'mistyrose': '#ffe4e1',
    'moccasin': '#ffe4b5',
    'navajowhite': '#ffdead',
    'oldlace': '#fdf5e6',
    'olivedrab': '#6b8e23',
    'orange': '#ffa500',
    'orangered': '#ff4500',
    'orchid': '#da70d6',
    'palegoldenrod': '#eee8aa',
    'palegreen': '#98fb98',
    'paleturquoise': '#afeeee',
    'palevioletred': '#db7093',
    'papayawhip': '#ffefd5',
    'peachpuff': '#ffdab9',
    'peru': '#cd853f',
    'pink': '#ffc0cb',
    'plum': '#dda0dd',
    'powderblue': '#b0e0e6',
    'rebeccapurple': '#663399',
    'rosybrown': '#bc8f8f',
    'royalblue': '#4169e1',
    'saddlebrown': '#8b4513',
    'salmon': '#fa8072',
    'sandybrown': '#f4a460',
    'seagreen': '#2e8b57',
    'seashell': '#fff5ee',
    'sienna': '#a0522d',
    'skyblue': '#87ceeb',
    'slateblue': '#6a5acd',
    'slategray': '#708090',
    'snow': '#fffafa',
    'springgreen': '#00ff7f',
    'steelblue': '#4682b4',
    'tan': '#d2b48c',
    'thistle': '#d8bfd8',
    'tomato': '#ff6347',
    'turquoise': '#40e0d0',
    'violet': '#ee82ee',
    'wheat': '#f5deb3',
    'whitesmoke': '#f5f5f5',
    'yellowgreen': '#9acd32',
}


def load_names(path: str | Path) -> dict[str, str]:
    """Load a named colour dataset from JSON.

    Accepts {"name": "#hex", ...} or [{"name": ..., "hex": ...}, ...]
    (the color-name-list layout). Values are normalized to '#rrggbb'.
    """
    with open(path, encoding='utf-8') as f:
        raw = json.load(f)

    if isinstance(raw, dict):
        pairs = raw.items()
    elif isinstance(raw, list):
        try:
            pairs = [(entry['name'], entry['hex']) for entry in raw]
        except (KeyError, TypeError) as exc:
            raise InvalidFormat(f'{path}: list entries need "name" and "hex" keys') from exc
    else:
        raise InvalidFormat(f'{path}: expected a JSON object or list, got {type(raw).__name__}')

    return {str(name): f'#{normalize(value)}' for name, value in pairs}


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean distance in RGB space."""
    diff = np.array(a, dtype=np.int64) - np.array(b, dtype=np.int64)
    return float(np.sqrt((diff * diff).sum()))


def nearest_colour(colour: ColourInput, names: dict[str, str] | None = None) -> NearestMatch | None:
    """Closest named entry by RGB distance, or None for an empty dataset."""
    dataset = CSS_COLOURS if names is None else names
    if not dataset:
        return None

    labels = list(dataset)
    # int64 so (0 - 200) does not wrap the way uint8 would
    table = np.array([hex_to_rgb(dataset[n]).as_tuple() for n in labels], dtype=np.int64)
    target = np.array(hex_to_rgb(normalize(colour)).as_tuple(), dtype=np.int64)
    distances = np.sqrt(((table - target) ** 2).sum(axis=1))
    best = int(np.argmin(distances))
    return NearestMatch(
        name=labels[best],
        value=f'#{normalize(dataset[labels[best]])}',
        distance=round(float(distances[best]), 4),
    )


def lookup(colour: ColourInput, nearest: bool = True, names: dict[str, str] | None = None) -> str | NearestMatch:
    """Name of the colour, its nearest named neighbour, or NOT_FOUND."""
    hex_code = f'#{normalize(colour)}'
    dataset = CSS_COLOURS if names is None else names

    for name, value in dataset.items():
        if normalize(value) == hex_code[1:]:
            return name

    if nearest:
        match = nearest_colour(hex_code, dataset)
        if match is not None:
            return match
    return NOT_FOUND
