# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""Utility modules used by dicomtree and its test-suite."""
