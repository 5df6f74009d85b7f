"""Liquid-style template processing over flat string variables."""