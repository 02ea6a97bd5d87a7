"""Curated Latin -> Devanagari tables for Marathi names.

Both tables are read-only views; build a new ``Transliterator`` (or use
``Transliterator.with_words``) to extend them.
"""

from types import MappingProxyType

# Romanization units matched greedily (longest first, max 3 characters).
ROMANIZATION_TABLE: MappingProxyType[str, str] = MappingProxyType(
    {
        # Vowels
        "a": "अ",
        "aa": "आ",
        "i": "इ",
        "ii": "ई",
        "ee": "ई",
        "u": "उ",
        "uu": "ऊ",
        "oo": "ऊ",
        "e": "ए",
        "ai": "ऐ",
        "o": "ओ",
        "au": "औ",
        # Consonants
        "k": "क",
        "kh": "ख",
        "g": "ग",
        "gh": "घ",
        "ng": "ङ",
        "ch": "च",
        "chh": "छ",
        "j": "ज",
        "jh": "झ",
        "ny": "ञ",
        "t": "त",
        "th": "थ",
        "d": "द",
        "dh": "ध",
        "n": "न",
        "p": "प",
        "ph": "फ",
        "b": "ब",
        "bh": "भ",
        "m": "म",
        "y": "य",
        "r": "र",
        "l": "ल",
        "v": "व",
        "w": "व",
        "s": "स",
        "sh": "श",
        "shh": "ष",
        "h": "ह",
        # Retroflex and conjuncts
        "tt": "ट",
        "tth": "ठ",
        "dd": "ड",
        "ddh": "ढ",
        "nn": "ण",
        "ksh": "क्ष",
        "tr": "त्र",
        "gy": "ज्ञ",
        # Syllables with vowel signs
        "ka": "क",
        "ki": "कि",
        "kii": "की",
        "ku": "कु",
        "kuu": "कू",
        "ke": "के",
        "kai": "कै",
        "ko": "को",
        "kau": "कौ",
    }
)

# Whole-word spellings of names common in the roll.
COMMON_WORDS: MappingProxyType[str, str] = MappingProxyType(
    {
        # Given names
        "ajay": "अजय",
        "amol": "अमोल",
        "ananda": "आनंद",
        "ankush": "अंकुश",
        "dashrath": "दशरथ",
        "dinesh": "दिनेश",
        "gajanan": "गजानन",
        "ganesh": "गणेश",
        "laxman": "लक्ष्मण",
        "mahesh": "महेश",
        "mangesh": "मंगेश",
        "rakesh": "राकेश",
        "ramdas": "रामदास",
        "ranjana": "रंजना",
        "sanjay": "संजय",
        "shivaji": "शिवाजी",
        "suresh": "सुरेश",
        "usha": "उषा",
        "vijay": "विजय",
        "vitthal": "विठ्ठल",
        # Surnames
        "amrutkar": "अमृतकर",
        "badale": "बधाले",
        "badhale": "बधाले",
        "bhosale": "भोसले",
        "chavan": "चव्हाण",
        "deshmukh": "देशमुख",
        "gaikwad": "गायकवाड",
        "ingle": "इंगळे",
        "jadhav": "जाधव",
        "kamble": "कांबळे",
        "kokate": "कोकाटे",
        "kulkarni": "कुलकर्णी",
        "more": "मोरे",
        "patil": "पाटील",
        "pawar": "पवार",
        "rao": "राव",
        "raut": "राऊत",
        "reddy": "रेड्डी",
        "salunkhe": "साळुंखे",
        "sargar": "सरगर",
        "shinde": "शिंदे",
        "thakur": "ठाकूर",
        # Honorific suffixes
        "bai": "बाई",
        "devi": "देवी",
    }
)

MAX_UNIT_LENGTH = max(len(unit) for unit in ROMANIZATION_TABLE)
