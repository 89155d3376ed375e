#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/palette/__init__.py
