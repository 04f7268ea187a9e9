"""Directory domain - education centers and what they publish"""
