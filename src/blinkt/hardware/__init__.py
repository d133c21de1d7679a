"""
Hardware layer: GPIO pin management and the APA102 strip driver.
"""
