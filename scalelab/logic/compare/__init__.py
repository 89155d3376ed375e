#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/compare/__init__.py
