#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Opaque ID Codec
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: src/default_blocklist.py

"""
Default list of words that generated IDs must not contain.

Static data only. Words are stored lower-case; leetspeak variants are listed
explicitly because matching is literal. Replace or extend through the
`[Codec]` section of config.ini rather than editing this file.

This is a curated subset, not the published word list that other
implementations of the scheme ship. A number whose default encoding contains
a word from that list but not from this one gets a different ID here than in
those implementations (and vice versa). Load the full list through
`blocklist_file` when IDs must match another implementation exactly.
"""

DEFAULT_BLOCKLIST = frozenset({
    "0rgasm", "1d10t", "1d1ot", "1di0t", "1diot", "1mbec11e", "1mbec1le",
    "1mbeci1e", "1mbecile", "a11upat0", "a11upato", "a1lupat0", "a1lupato",
    "aand", "ah01e", "ah0le", "aho1e", "ahole", "al1upat0", "al1upato",
    "allupat0", "allupato", "ana1", "ana1e", "anal", "anale", "anus",
    "arrapat0", "arrapato", "arsch", "arse", "ass", "b00b", "b00be", "b01ata",
    "b0ceta", "b0iata", "b0ob", "b0obe", "b0sta", "b1tch", "b1te", "b1tte",
    "ba1atkar", "balatkar", "bastard0", "bastardo", "batt0na", "battona",
    "bitch", "bite", "bitte", "bo0b", "bo0be", "bo1ata", "boceta", "boiata",
    "boob", "boobe", "bosta", "bran1age", "bran1er", "bran1ette", "bran1eur",
    "bran1euse", "branlage", "branler", "branlette", "branleur", "branleuse",
    "c0ck", "c0g110ne", "c0g11one", "c0g1i0ne", "c0g1ione", "c0gl10ne",
    "c0gl1one", "c0gli0ne", "c0glione", "c0na", "c0nnard", "c0nnasse", "c0nne",
    "c0u111es", "c0u11les", "c0u1l1es", "c0u1lles", "c0ul11es", "c0ul1les",
    "c0ull1es", "c0ulles", "c1it", "c11t", "c1t", "cl1t", "clit", "cock",
    "cu10", "cu1", "cu1o", "cul", "cul0", "culo", "cum", "d1ck", "dick",
    "f0ttere", "f0tze", "fag", "fagg0t", "faggot", "fotze", "fuck", "fucker",
    "fuk", "h0r", "jerk", "k0ck", "n1gga", "n1gger", "nigga", "nigger", "p0rn",
    "p1ss", "piss", "porn", "pussy", "puta", "s1ut", "sex", "sexy", "sh1t",
    "shit", "slut", "tw4t", "twat", "wank", "wanker", "whore", "wh0re",
})

# === End of src/default_blocklist.py ===
