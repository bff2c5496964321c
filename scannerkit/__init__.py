"""
scannerkit - install the Sonar Scanner CLI on CI runners.
"""
