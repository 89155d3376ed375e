#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/subcommands/command_registry.py

from . import (
    verify,
    compare
)

SUBCOMMANDS = {
    'verify': verify,
    'compare': compare
}
