# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Command translation stages
# host level:
# the host routes a native command (group GUID, numeric id, optional variant) to us

# editor level:
# decode: native command -> key input + command kind, with held modifiers applied
# encode: key input -> native command, so the host can perform a native action
