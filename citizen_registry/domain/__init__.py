# SPDX-License-Identifier: Apache-2.0

"""
Domain logic package for the citizen registry.

This package contains pure guard checks and record transitions.
Nothing here owns state, logs, or traces; the registry service does.
"""
