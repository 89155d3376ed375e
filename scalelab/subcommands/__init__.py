#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/subcommands/__init__.py
