#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/__init__.py
