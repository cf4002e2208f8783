#!/usr/bin/env python

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from setuptools import find_packages
from setuptools import setup

setup(
    name="editcommands",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="Translate between host editor commands and key input for a modal editing engine",
    author="Rose Davidson",
    author_email="rose@metaclassical.com",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Text Editors",
    ],
    python_requires=">=3.10",
    install_requires=[
        "cattrs>=22.2.0",
        "msgspec",
    ],
    tests_require=["pytest>=6.2.4"],
    extras_require={
        "test": ["pytest>=6.2.4"],
    },
    entry_points={
        "console_scripts": [
            "editcommands-decode = editcommands.scripts:decode_cli",
            "editcommands-encode = editcommands.scripts:encode_cli",
            "editcommands-table = editcommands.scripts:command_table_cli",
        ],
    },
)
