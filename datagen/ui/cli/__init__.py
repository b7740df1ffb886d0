"""
CLI — interactive menu and click sub-commands.
"""
