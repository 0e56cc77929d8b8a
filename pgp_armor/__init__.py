"""
Configure base logger for pgp_armor (see pgp_armor.log for details).

"""
import pgp_armor.log

# pgp-armor version
__version__ = "1.0.0"
