#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/verify/__init__.py
