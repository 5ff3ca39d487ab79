# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of gefparse.

# gefparse is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# gefparse is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with gefparse.  If not, see <https://www.gnu.org/licenses/>.

"""NEN 5104 soil description codes and related BORE code lists."""


NEN5104_SOIL_CODES = {
    "Gs": "Grind, siltig",
    "Gz1": "Grind, zwak zandig",
    "Gz2": "Grind, matig zandig",
    "Gz3": "Grind, sterk zandig",
    "Gz4": "Grind, uiterst zandig",
    "Ks1": "Klei, zwak siltig",
    "Ks2": "Klei, matig siltig",
    "Ks3": "Klei, sterk siltig",
    "Ks4": "Klei, uiterst siltig",
    "Kz1": "Klei, zwak zandig",
    "Kz2": "Klei, matig zandig",
    "Kz3": "Klei, sterk zandig",
    "Lz1": "Leem, zwak zandig",
    "Lz3": "Leem, sterk zandig",
    "Vm": "Veen, mineraalarm",
    "Vk1": "Veen, zwak kleiig",
    "Vk3": "Veen, matig kleiig",
    "Vz1": "Veen, zwak zandig",
    "Vz3": "Veen, matig zandig",
    "Zk": "Zand, kleiig",
    "Zs1": "Zand, zwak siltig",
    "Zs2": "Zand, matig siltig",
    "Zs3": "Zand, sterk siltig",
    "Zs4": "Zand, uiterst siltig",
    "g1": "zwak grindig",
    "g2": "matig grindig",
    "g3": "sterk grindig",
    "h1": "zwak humeus",
    "h2": "matig humeus",
    "h3": "sterk humeus",
    "GM": "geen monster",
    "NBE": "niet benoemd",
}

NON_STANDARD_SOIL_CODES = {
    "G": "grind",
    "K": "klei",
    "L": "leem",
    "V": "veen",
    "Z": "zand",
    "KX": "kleiig",
    "K1": "zwak kleiig",
    "K3": "sterk kleiig",
    "SX": "siltig",
    "S1": "zwak siltig",
    "S2": "matig siltig",
    "S3": "sterk siltig",
    "S4": "uiterst siltig",
    "ZX": "zandig",
    "Z1": "zwak zandig",
    "Z2": "matig zandig",
    "Z3": "sterk zandig",
    "Z4": "uiterst zandig",
    "GX": "grindig",
    "G1": "zwak grindig",
    "G2": "matig grindig",
    "G3": "sterk grindig",
    "HX": "humeus",
    "H1": "zwak humeus",
    "H2": "matig humeus",
    "H3": "sterk humeus",
}

ADDITIONAL_SOIL_CODES = {
    "BLK": "blokken",
    "KEI": "keien",
    "STN": "stenen",
    "BRK": "bruinkool",
    "DET": "detritus",
    "DY": "dy",
    "GY": "gyttja",
    "HO": "hout",
    "GCZ": "glauconietzand",
    "GOZ": "goethietzand",
    "SHE": "schelpen",
    "SLI": "slib",
    "KAS": "kalksteen",
    "LEI": "leisteen",
    "MER": "mergel",
    "SHA": "schalie",
    "ZNS": "zandsteen",
    "GES": "vast gesteente",
    "AF": "afval",
    "AS": "asfalt",
    "BE": "beton",
    "BI": "bitumen",
    "BT": "ballast",
    "BST": "baksteen",
    "GI": "gips",
    "GA": "glas",
    "HK": "houtskool",
    "HU": "huisvuil",
    "KA": "kalk",
    "KG": "kolengruis",
    "KO": "kolen",
    "KT": "krijt",
    "ME": "metaal",
    "MI": "mijnsteen",
    "OE": "oer",
    "PL": "planten",
    "PU": "puin",
    "SI": "sintels",
    "SL": "slakken",
    "WO": "wortels",
    "YZ": "ijzer",
}

SECONDARY_COLORS = {
    "TBL": "blauw-",
    "TBR": "bruin-",
    "TGE": "geel-",
    "TGN": "groen-",
    "TGR": "grijs-",
    "TOL": "olijf-",
    "TOR": "oranje-",
    "TPA": "paars-",
    "TRO": "rood-",
    "TWI": "wit-",
    "TRZ": "roze-",
    "TZW": "zwart-",
}

MAIN_COLORS = {
    "BL": "blauw",
    "BR": "bruin",
    "GE": "geel",
    "GN": "groen",
    "GR": "grijs",
    "OL": "olijf",
    "OR": "oranje",
    "PA": "paars",
    "RO": "rood",
    "WI": "wit",
    "RZ": "roze",
    "ZW": "zwart",
    "LI": "licht",
    "DO": "donker",
}

SAND_MEDIAN_CLASSES = {
    "ZUF": "uiterst fijn",
    "ZZF": "zeer fijn",
    "ZMF": "matig fijn",
    "ZMG": "matig grof",
    "ZZG": "zeer grof",
    "ZUG": "uiterst grof",
}

SAND_SPREAD = {
    "SZK": "zeer kleine spreiding",
    "SMK": "matig kleine spreiding",
    "SMG": "matig grote spreiding",
    "SZG": "zeer grote spreiding",
    "STW": "tweetoppige spreiding",
}

GRAIN_SHAPE = {
    "ZZH": "sterk hoekig",
    "ZHK": "hoekig",
    "ZMH": "matig hoekig",
    "ZMA": "matig afgerond",
    "ZAF": "afgerond",
    "ZSA": "sterk afgerond",
}

GRAVEL_MEDIAN_CLASSES = {
    "GFN": "fijn grind",
    "GMG": "matig grof grind",
    "GZG": "zeer grof grind",
}

GRAVEL_FRACTIONS = {
    "FN1": "spoor fijn grind",
    "FN2": "weinig fijn grind",
    "FN3": "veel fijn grind",
    "FN4": "zeer veel fijn grind",
    "FN5": "uiterst veel fijn grind",
    "MG1": "spoor matig grof grind",
    "MG2": "weinig matig grof grind",
    "MG3": "veel matig grof grind",
    "MG4": "zeer veel matig grof grind",
    "MG5": "uiterst veel matig grof grind",
    "GG1": "spoor zeer grof grind",
    "GG2": "weinig zeer grof grind",
    "GG3": "veel zeer grof grind",
    "GG4": "zeer veel zeer grof grind",
    "GG5": "uiterst veel zeer grof grind",
}

PEAT_AMORPHOSITY = {
    "AV1": "zwak amorf",
    "AV2": "matig amorf",
    "AV3": "sterk amorf",
}

PEAT_TYPES = {
    "BSV": "bosveen",
    "HEV": "heideveen",
    "MOV": "mosveen",
    "RIV": "rietveen",
    "SZV": "Scheuchzeriaveen",
    "VMV": "veenmosveen",
    "WOV": "wollegrasveen",
    "ZEV": "zeggeveen",
}

CONSISTENCY = {
    "KZSL": "zeer slap",
    "KSLA": "slap",
    "KMSL": "matig slap",
    "KMST": "matig stevig",
    "KSTV": "stevig",
    "KZST": "zeer stevig",
    "KHRD": "hard",
    "KZHR": "zeer hard",
    "LZSL": "zeer slap",
    "LSLA": "slap",
    "LMSL": "matig slap",
    "LMST": "matig stevig",
    "LSTV": "stevig",
    "LZST": "zeer stevig",
    "LHRD": "hard",
    "LZHR": "zeer hard",
    "VZSL": "zeer slap",
    "VSLA": "slap",
    "VMSL": "matig slap",
    "VMST": "matig stevig",
    "VSTV": "stevig",
}

SAND_COMPACTION = {
    "LOS": "los gepakt",
    "NOR": "normaal gepakt",
    "VAS": "vast gepakt",
}

ROCK_HARDNESS = {
    "VGZZ": "zeer zacht",
    "VGZA": "zacht",
    "VGMZ": "matig zacht",
    "VGMH": "matig hard",
    "VGHA": "hard",
    "VGZH": "zeer hard",
    "VGEH": "extreem hard",
}

SHELL_CONTENT = {
    "SCH0": "geen schelpmateriaal",
    "SCH1": "spoor schelpmateriaal",
    "SCH2": "weinig schelpmateriaal",
    "SCH3": "veel schelpmateriaal",
}

CALCIUM_CONTENT = {
    "CA1": "kalkloos",
    "CA2": "kalkarm",
    "CA3": "kalkrijk",
}

GLAUCONITE_CONTENT = {
    "GC0": "geen glauconiet",
    "GC1": "spoor glauconiet",
    "GC2": "weinig glauconiet",
    "GC3": "veel glauconiet",
    "GC4": "zeer veel glauconiet",
    "GC5": "uiterst veel glauconiet",
}

ANTHROPOGENIC_ADMIXTURES = {
    "BST1": "spoor baksteen",
    "BST2": "weinig baksteen",
    "BST3": "veel baksteen",
    "PUR1": "spoor puinresten",
    "PUR2": "weinig puinresten",
    "PUR3": "veel puinresten",
    "SIN1": "spoor sintels",
    "SIN2": "weinig sintels",
    "SIN3": "veel sintels",
    "STO1": "spoor stortsteen",
    "STO2": "weinig stortsteen",
    "STO3": "veel stortsteen",
    "VUI1": "spoor vuilnis",
    "VUI2": "weinig vuilnis",
    "VUI3": "veel vuilnis",
    "GL": "gley",
    "RT": "roest",
    "SE": "silex",
}

LAYERING = {
    "BIO": "bioturbatie",
    "DWO": "doorworteling",
    "GCM": "cm-gelaagdheid",
    "GDM": "dm-gelaagdheid",
    "GDU": "dubbeltjes-gelaagdheid",
    "GMM": "mm-gelaagdheid",
    "GRG": "graafgangen",
    "GSC": "scheve gelaagdheid",
    "GSP": "spekkoek-gelaagdheid",
    "HOM": "homogeen",
    "GE1": "zwak gelaagd",
    "GE2": "weinig gelaagd",
    "GE3": "sterk gelaagd",
    "GEX": "gelaagd",
    "STGL": "met grindlagen",
    "STKL": "met kleilagen",
    "STLL": "met leemlagen",
    "STSL": "met stenenlagen",
    "STVL": "met veenlagen",
    "STZL": "met zandlagen",
    "STBR": "met bruinkoollagen",
    "STDE": "met detrituslagen",
    "STGY": "met gyttjalagen",
    "STSC": "met schelpenlagen",
}

GEOLOGICAL_INTERPRETATION = {
    "ANT": "Antropogeen",
    "BOO": "Boomse klei",
    "DEZ": "dekzand",
    "KEL": "keileem",
    "LSS": "loess",
    "POK": "potklei",
    "WAR": "warven",
}

STRATIGRAPHIC_UNITS = {
    "DR": "Formatie van Drente",
    "EC": "Formatie van Echteld",
    "KR": "Formatie van Kreftenheye",
    "NA": "Formatie van Naaldwijk",
    "NI": "Formatie van Nieuwkoop",
    "TW": "Formatie van Twente",
    "WA": "Formatie van Waalre",
}

ALL_CODES = {}
for _table in (
    NEN5104_SOIL_CODES,
    NON_STANDARD_SOIL_CODES,
    ADDITIONAL_SOIL_CODES,
    SECONDARY_COLORS,
    MAIN_COLORS,
    SAND_MEDIAN_CLASSES,
    SAND_SPREAD,
    GRAIN_SHAPE,
    GRAVEL_MEDIAN_CLASSES,
    GRAVEL_FRACTIONS,
    PEAT_AMORPHOSITY,
    PEAT_TYPES,
    CONSISTENCY,
    SAND_COMPACTION,
    ROCK_HARDNESS,
    SHELL_CONTENT,
    CALCIUM_CONTENT,
    GLAUCONITE_CONTENT,
    ANTHROPOGENIC_ADMIXTURES,
    LAYERING,
    GEOLOGICAL_INTERPRETATION,
    STRATIGRAPHIC_UNITS,
):
    ALL_CODES.update(_table)
del _table

DRILLING_METHOD_CODES = {
    "ACK": "Ackermann-steekboring",
    "AVE": "Avegaarboring",
    "AVH": "Holle avegaarboring",
    "AVS": "Avegaar-steekboring",
    "BES": "Begemann-steekboring",
    "BEI": "Beitel",
    "BSA": "Beeker-sampler",
    "BEV": "Bevriezen",
    "CFL": "Counter-flushboring",
    "DRC": "Dropcorer",
    "EDM": "Edelmanboring",
    "GD1": "Geodoff 1 boring",
    "GD2": "Geodoff 2 boring",
    "GD3": "Geodoff 3 boring",
    "GUT": "Guts",
    "GRA": "Graven",
    "HAH": "Hamon happer",
    "HAN": "Handboring",
    "HAP": "Hapmonster",
    "KER": "Kernboring",
    "LEP": "Lepelboring",
    "LUC": "Luchtliftboring",
    "LUH": "Luchthamer",
    "ONT": "Ontsluiting",
    "OSC": "Oscorer",
    "PIS": "Pistoncorer",
    "PUL": "Pulsboring",
    "PUH": "Handpuls",
    "PUK": "Pulsboring (lichte stelling)",
    "PUM": "Pulsboring (mechanisch)",
    "RAM": "Ramguts",
    "RFL": "Ro-flushboring",
    "RIV": "Riverside boring",
    "SFC": "Straight-flushboring met core sampling",
    "SFL": "Straight-flushboring",
    "SLB": "Slibsteker",
    "SPI": "Spiraalboring",
    "SPO": "Spoelboring",
    "SPS": "Spoelboring met steekmonsters",
    "SPU": "Spuitboring",
    "STE": "Steekboring",
    "TRF": "Trilflipboring",
    "TRI": "Trilboring",
    "VDS": "Van der Staay boring",
    "VVH": "Van Veen happer",
    "VIB": "Vibrocorer",
    "ZEN": "Zenkovitchboring",
    "ZUI": "Zuigboring",
}

# Standardized-code form used by the "Boormethode boortraject" texts
DRILLING_METHOD_STANDARDIZED_CODES = [
    {"code": code, "description": description} for code, description in DRILLING_METHOD_CODES.items()
]

SOIL_TYPE_NAMES = {
    "G": "Grind (Gravel)",
    "Z": "Zand (Sand)",
    "L": "Leem (Silt)",
    "K": "Klei (Clay)",
    "V": "Veen (Peat)",
    "NBE": "Niet beschreven (Not described)",
}

SPECIMEN_CODES = {
    "geroerd_ongeroerd": [
        {"code": "G", "description": "Geroerd (Disturbed)"},
        {"code": "O", "description": "Ongeroerd (Undisturbed)"},
    ],
    "monstersteekapparaat": [
        {"code": "AMS", "description": "Ackermann-apparaat"},
        {"code": "BMS", "description": "Begemann-continu-monstersteekapparaat"},
        {"code": "DMS", "description": "Druksteekapparaat"},
        {"code": "ZMS", "description": "Zuiger-monstersteekapparaat"},
        {"code": "OMS", "description": "Open monstersteekapparaat"},
        {"code": "SMS", "description": "Monstersteekapparaat SPT"},
    ],
    "dik_dunwandig": [
        {"code": "DIK", "description": "Dikwandig (Thick-walled)"},
        {"code": "DUN", "description": "Dunwandig (Thin-walled)"},
    ],
    "monstermethode": [
        {"code": "D", "description": "Drukken (Pushed/Static)"},
        {"code": "H", "description": "Hameren (Hammered/Dynamic)"},
    ],
}
