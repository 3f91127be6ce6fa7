# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
buildsign: build-configuration loader for Android app wrappers.

Reads key.properties into signing credentials, resolves debug/release build
variants, and validates the declarative android settings before a build runs.
"""

__version__ = "0.1.0"
