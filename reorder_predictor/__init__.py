#////////////////////////////////////////////////////////////////////////////////#
# File:         __init__.py                                                      #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2026-10-12                                                       #
# Description:  Package initialization for the inventory reorder predictor.     #
#////////////////////////////////////////////////////////////////////////////////#

"""
Inventory reorder predictor package.

This package builds a synthetic inventory catalog, trains a small neural network
classifier and labels each item "Reorder" or "Sufficient".
"""
