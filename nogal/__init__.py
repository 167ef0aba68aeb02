"""NoGAL - purge mature (or any category of) MAME games using catver.ini."""
