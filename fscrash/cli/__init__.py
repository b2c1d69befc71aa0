# SPDX-License-Identifier: LGPL-3.0-or-later
# fscrash/cli/__init__.py
