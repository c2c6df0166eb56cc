"""Normalization of inconsistently wrapped XML property list bodies.

Endpoints answer with a bare ``<dict>``, a full ``<plist>`` document, either
of those inside a ``<Document>`` envelope, or a raw run of ``<key>``/value
pairs. :func:`normalize_plist_body` reduces all of them to the smallest
input the plist parser accepts.
"""

from __future__ import annotations

import re

DOCUMENT_XML_PATTERN = re.compile(r"<Document\b[^>]*>(.*)</Document>", re.IGNORECASE | re.DOTALL)
PLIST_XML_PATTERN = re.compile(r"<plist\b[^>]*>.*?</plist>", re.IGNORECASE | re.DOTALL)
DICT_XML_PATTERN = re.compile(r"<dict\b[^>]*>.*</dict>", re.IGNORECASE | re.DOTALL)


def normalize_plist_body(body: str) -> str:
    """Extracts a decodable plist fragment from ``body``.

    Steps run in a fixed order and each one only applies when it matches:

    1. strip whitespace, returning early when nothing is left;
    2. unwrap the inner content of a ``<Document>`` envelope;
    3. narrow to the first embedded ``<plist>...</plist>``;
    4. return the outermost ``<dict>...</dict>`` if there is one;
    5. wrap a bare ``<key>`` fragment in ``<dict>``;
    6. otherwise pass the body through for the parser to reject.

    A ``<dict>`` always wins over the plist root element, so a plist whose
    root is an array of dicts is reduced to the dict.
    """
    normalized = body.strip()
    if not normalized:
        return normalized

    document_body = extract_document_inner_body(normalized)
    if document_body:
        normalized = document_body

    embedded_plist = extract_embedded_plist(normalized)
    if embedded_plist:
        normalized = embedded_plist

    dict_body = extract_embedded_dict(normalized)
    if dict_body:
        return dict_body

    if "<key>" in normalized:
        return f"<dict>{normalized}</dict>"

    return normalized


def extract_document_inner_body(body: str) -> str | None:
    match = DOCUMENT_XML_PATTERN.search(body)
    if match is None:
        return None
    inner = match.group(1).strip()
    return inner or None


def extract_embedded_plist(body: str) -> str | None:
    match = PLIST_XML_PATTERN.search(body)
    if match is None:
        return None
    return match.group(0).strip() or None


def extract_embedded_dict(body: str) -> str | None:
    match = DICT_XML_PATTERN.search(body)
    if match is None:
        return None
    return match.group(0).strip() or None
