#!/usr/bin/env python3
#
# @file    exceptions.py
# @brief   Exceptions raised by Spiral splitters
# @author  Michael Hucka
#
# <!---------------------------------------------------------------------------
# Copyright (C) 2015 by the California Institute of Technology.
# This software is part of CASICS, the Comprehensive and Automated Software
# Inventory Creation System.  For more information, visit http://casics.org.
# ------------------------------------------------------------------------- -->

class SplitterError(Exception):
    '''A splitter could not be set up or could not process its input.'''
    pass
