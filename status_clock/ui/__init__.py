#!/usr/bin/env python3
"""Terminal surfaces for the status clock: status bar, tooltip, dialogs and panels."""
