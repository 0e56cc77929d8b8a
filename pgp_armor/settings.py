"""
<Program Name>
  settings.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  A central place to define default settings that can be used throughout the
  package.

  Defaults can be changed,
   - here (hardcoded),
   - or programmatically, e.g.
     ```
     import pgp_armor.settings
     pgp_armor.settings.RADIX64_LINE_LENGTH = 76
     ```

"""
# The debug setting is used to set the pgp_armor base logger to logging.DEBUG
# NOTE: It is read once, when `pgp_armor.log` is first imported.
DEBUG = False

# Number of radix-64 characters per armor body line (RFC4880 6.3. demands
# lines of no more than 76 characters, GnuPG and friends use 64)
RADIX64_LINE_LENGTH = 64

# Value of the "Charset" header added to every non-signature armor
DEFAULT_CHARSET = "UTF-8"
