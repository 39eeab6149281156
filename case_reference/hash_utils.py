# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Hash utilities.

MD5 is only used to fingerprint the parsed document text in the case file and
to build stable style names in the ODS report. It is not used for security.
"""

import hashlib


def md5_text(text: str) -> str:
    """Return the lowercase hex MD5 digest of UTF-8 encoded text."""

    # FIPS-enabled OpenSSL builds reject MD5 unless it is flagged as
    # non-security use.
    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()
