#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/shared/__init__.py
