# SPDX-License-Identifier: MIT
"""Regular expressions describing the SemVer grammar and the range dialects.

Group numbering matters: the processors read fields by position.

- STRICT: 1 major, 2 minor, 3 patch, 4 pre-release, 5 build
- XRANGE_PLAIN: 1 major, 2 minor, 3 patch, 4 pre-release, 5 build
- HYPHEN: 1 whole "from", 2-6 its parts, 7 whole "to", 8-12 its parts
- XRANGE: 1 operator, then the XRANGE_PLAIN groups
- COMPARATOR: 1 operator, 2 whole version

See https://semver.org/#backusnaur-form-grammar-for-valid-semver-versions
"""

from __future__ import annotations

import re

# Largest value accepted for major, minor and patch
INT_MAX = 2**31 - 1

# Longest digit run coerce() will consider for one numeral
COERCE_MAX_DIGITS = 16

NUMERIC_IDENTIFIER = r"0|[1-9]\d*"

NON_NUMERIC_IDENTIFIER = r"\d*[a-zA-Z-][a-zA-Z0-9-]*"

MAIN_VERSION = rf"({NUMERIC_IDENTIFIER})\.({NUMERIC_IDENTIFIER})\.({NUMERIC_IDENTIFIER})"

PRERELEASE_IDENTIFIER = rf"(?:{NUMERIC_IDENTIFIER}|{NON_NUMERIC_IDENTIFIER})"

PRERELEASE = rf"(?:-({PRERELEASE_IDENTIFIER}(?:\.{PRERELEASE_IDENTIFIER})*))"

BUILD_IDENTIFIER = r"[0-9A-Za-z-]+"

BUILD = rf"(?:\+({BUILD_IDENTIFIER}(?:\.{BUILD_IDENTIFIER})*))"

STRICT_PLAIN = rf"v?{MAIN_VERSION}{PRERELEASE}?{BUILD}?"

STRICT = rf"^{STRICT_PLAIN}$"

# x, X and * are X-Range wildcards, + comes from Ivy
XRANGE_IDENTIFIER = rf"{NUMERIC_IDENTIFIER}|x|X|\*|\+"

XRANGE_PLAIN = (
    rf"[v=\s]*({XRANGE_IDENTIFIER})"
    rf"(?:\.({XRANGE_IDENTIFIER})"
    rf"(?:\.({XRANGE_IDENTIFIER})"
    rf"(?:{PRERELEASE})?{BUILD}?)?)?"
)

CARET = rf"^\^{XRANGE_PLAIN}$"

TILDE = rf"^~>?{XRANGE_PLAIN}$"

HYPHEN = rf"^\s*({XRANGE_PLAIN})\s+-\s+({XRANGE_PLAIN})\s*$"

IVY = (
    r"^([\[\](])([0-9]+)?\.?([0-9]+)?\.?([0-9]+)?"
    r",([0-9]+)?\.?([0-9]+)?\.?([0-9]+)?([\]\[)])$"
)

GLTL = r"((?:<|>)?=?)"

XRANGE = rf"^{GLTL}\s*{XRANGE_PLAIN}$"

COMPARATOR = rf"^{GLTL}\s*({STRICT_PLAIN})$"

COERCE = (
    rf"(^|\D)(\d{{1,{COERCE_MAX_DIGITS}}})"
    rf"(?:\.(\d{{1,{COERCE_MAX_DIGITS}}}))?"
    rf"(?:\.(\d{{1,{COERCE_MAX_DIGITS}}}))?"
    r"(?:$|\D)"
)

# Numerals and whitespace are ASCII only
STRICT_PATTERN = re.compile(STRICT, re.ASCII)
CARET_PATTERN = re.compile(CARET, re.ASCII)
TILDE_PATTERN = re.compile(TILDE, re.ASCII)
HYPHEN_PATTERN = re.compile(HYPHEN, re.ASCII)
IVY_PATTERN = re.compile(IVY, re.ASCII)
XRANGE_PATTERN = re.compile(XRANGE, re.ASCII)
COMPARATOR_PATTERN = re.compile(COMPARATOR, re.ASCII)
COERCE_PATTERN = re.compile(COERCE, re.ASCII)
