"""RGBA colors and the viridis color map."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA color; all zeros means unset."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def is_zero(self) -> bool:
        return self.r == 0 and self.g == 0 and self.b == 0 and self.a == 0

    def __str__(self) -> str:
        return f"rgba({self.r},{self.g},{self.b},{self.a / 255:.1f})"


COLOR_TRANSPARENT = Color()
COLOR_WHITE = Color(255, 255, 255, 255)
COLOR_BLACK = Color(0, 0, 0, 255)

_VIRIDIS_RGB = (
    0x440154, 0x440255, 0x450357, 0x450558, 0x45065A, 0x46085B, 0x46095D, 0x460B5E,
    0x460C60, 0x470E61, 0x470F62, 0x471164, 0x471265, 0x471466, 0x481568, 0x481669,
    0x48186A, 0x48196C, 0x481A6D, 0x481C6E, 0x481D6F, 0x481E70, 0x482071, 0x482173,
    0x482274, 0x482475, 0x482576, 0x482677, 0x482778, 0x472979, 0x472A79, 0x472B7A,
    0x472C7B, 0x472E7C, 0x462F7D, 0x46307E, 0x46317E, 0x46337F, 0x453480, 0x453581,
    0x453681, 0x443882, 0x443983, 0x443A83, 0x433B84, 0x433C84, 0x433E85, 0x423F85,
    0x424086, 0x414186, 0x414287, 0x414387, 0x404588, 0x404688, 0x3F4788, 0x3F4889,
    0x3E4989, 0x3E4A89, 0x3D4B8A, 0x3D4D8A, 0x3C4E8A, 0x3C4F8A, 0x3B508B, 0x3B518B,
    0x3A528B, 0x3A538B, 0x39548C, 0x39558C, 0x38568C, 0x38578C, 0x37588C, 0x37598C,
    0x365B8D, 0x365C8D, 0x355D8D, 0x355E8D, 0x345F8D, 0x34608D, 0x33618D, 0x33628D,
    0x33638D, 0x32648E, 0x32658E, 0x31668E, 0x31678E, 0x30688E, 0x30698E, 0x2F6A8E,
    0x2F6B8E, 0x2F6C8E, 0x2E6D8E, 0x2E6E8E, 0x2D6F8E, 0x2D708E, 0x2D708E, 0x2C718E,
    0x2C728E, 0x2B738E, 0x2B748E, 0x2B758E, 0x2A768E, 0x2A778E, 0x29788E, 0x29798E,
    0x297A8E, 0x287B8E, 0x287C8E, 0x287D8E, 0x277E8E, 0x277F8E, 0x26808E, 0x26818E,
    0x26828E, 0x25838E, 0x25838E, 0x25848E, 0x24858E, 0x24868E, 0x23878E, 0x23888E,
    0x23898E, 0x228A8D, 0x228B8D, 0x228C8D, 0x218D8D, 0x218E8D, 0x218F8D, 0x20908D,
    0x20918C, 0x20928C, 0x20938C, 0x1F938C, 0x1F948C, 0x1F958B, 0x1F968B, 0x1F978B,
    0x1E988B, 0x1E998A, 0x1E9A8A, 0x1E9B8A, 0x1E9C89, 0x1E9D89, 0x1E9E89, 0x1E9F88,
    0x1EA088, 0x1FA188, 0x1FA287, 0x1FA387, 0x1FA386, 0x20A486, 0x20A586, 0x21A685,
    0x21A785, 0x22A884, 0x23A983, 0x23AA83, 0x24AB82, 0x25AC82, 0x26AD81, 0x27AE81,
    0x28AF80, 0x29AF7F, 0x2AB07F, 0x2BB17E, 0x2CB27D, 0x2EB37C, 0x2FB47C, 0x30B57B,
    0x32B67A, 0x33B779, 0x35B779, 0x36B878, 0x38B977, 0x39BA76, 0x3BBB75, 0x3DBC74,
    0x3EBD73, 0x40BE72, 0x42BE71, 0x44BF70, 0x46C06F, 0x48C16E, 0x49C26D, 0x4BC26C,
    0x4DC36B, 0x4FC46A, 0x51C569, 0x53C668, 0x55C666, 0x58C765, 0x5AC864, 0x5CC963,
    0x5EC962, 0x60CA60, 0x62CB5F, 0x65CC5E, 0x67CC5C, 0x69CD5B, 0x6CCE5A, 0x6ECE58,
    0x70CF57, 0x73D055, 0x75D054, 0x77D152, 0x7AD251, 0x7CD24F, 0x7FD34E, 0x81D44C,
    0x84D44B, 0x86D549, 0x89D548, 0x8BD646, 0x8ED744, 0x90D743, 0x93D841, 0x95D83F,
    0x98D93E, 0x9BD93C, 0x9DDA3A, 0xA0DA39, 0xA3DB37, 0xA5DB35, 0xA8DC33, 0xABDC32,
    0xADDD30, 0xB0DD2E, 0xB3DD2D, 0xB5DE2B, 0xB8DE29, 0xBBDF27, 0xBDDF26, 0xC0DF24,
    0xC3E023, 0xC5E021, 0xC8E120, 0xCBE11E, 0xCDE11D, 0xD0E21C, 0xD3E21B, 0xD5E21A,
    0xD8E319, 0xDBE318, 0xDDE318, 0xE0E418, 0xE2E418, 0xE5E418, 0xE8E519, 0xEAE519,
    0xEDE51A, 0xEFE61B, 0xF2E61C, 0xF4E61E, 0xF7E61F, 0xF9E721, 0xFBE723, 0xFEE724,
)

VIRIDIS_COLORS: tuple[Color, ...] = tuple(
    Color((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF, 0xFF) for rgb in _VIRIDIS_RGB
)


def viridis(v: float, vmin: float, vmax: float) -> Color:
    """Map ``v`` within ``[vmin, vmax]`` onto the viridis color map."""
    normalized = (v - vmin) / (vmax - vmin)
    index = min(max(int(normalized * 255), 0), 255)
    return VIRIDIS_COLORS[index]