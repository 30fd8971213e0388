#
# SPDX-FileCopyrightText: 2023 John Samuel <johnsamuelwrites@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
#

from mdpage.main import run

if __name__ == "__main__":
    raise SystemExit(run(prog="mdpage"))
