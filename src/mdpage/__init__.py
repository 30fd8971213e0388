#
# SPDX-FileCopyrightText: 2023 John Samuel <johnsamuelwrites@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
#
# Convert Markdown documents to a single HTML page with a table of contents

__version__ = "0.1.0"
