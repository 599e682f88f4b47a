import struct
import sys

import PaletteCore

WORD = struct.Struct(">H")

RGB_COLORSPACE = 0

versionNames = {
  1: "1 (photoshop < 7.0)",
  2: "2 (photoshop >= 7.0)"
}


class ACOException(Exception):
  pass


class UnexpectedEOFException(ACOException):
  def __init__(self, msg="Unexpected end of file!"):
    super().__init__(msg)


class BadVersionException(ACOException):
  def __init__(self, version):
    super().__init__("Unknown ACO file version {:d}. Exiting...".format(version))
    self.version = version


class ACOColor(PaletteCore.Color):
  @property
  def name(self):
    return self._name

  def __init__(self, r=0, g=0, b=0, name=None):
    super().__init__(r, g, b)
    if name is not None and type(name) is not str:
      raise TypeError
    self._name = name

  def __eq__(self, other):
    if not isinstance(other, ACOColor):
      return NotImplemented
    return (self.r, self.g, self.b, self.name) == \
           (other.r, other.g, other.b, other.name)

  def __hash__(self):
    return hash((self.r, self.g, self.b, self.name))

  def __repr__(self):
    return "ACOColor({:d}, {:d}, {:d}, {!r})".format(self.r, self.g, self.b, self.name)


class ACOPalette(PaletteCore.Palette):
  entryType = ACOColor

  def __init__(self, version, count):
    if version not in versionNames:
      raise BadVersionException(version)
    super().__init__()
    self.version = version
    self.len = count  # declared count, skipped records included


class ACOReader:
  """Reads ACO (Photoshop swatch) record sets from a binary stream.

  The stream is consumed one big-endian 16 bit word at a time and is never
  seeked, so two record sets can be read back to back from a pipe.
  Anything that can't be parsed raises an ACOException; non-RGB colors are
  reported on errfile and left out of the palette.
  """
  # name buffer size, nul terminator included
  nameBufLen = 256

  def __init__(self, infile, errfile=None):
    self.infile = infile
    self.errfile = errfile if errfile is not None else sys.stderr

  def log(self, msg):
    print(msg, file=self.errfile)

  def readWord(self):
    data = self.infile.read(WORD.size)
    if data is None or len(data) < WORD.size:
      return None
    return WORD.unpack(data)[0]

  def requireWord(self):
    word = self.readWord()
    if word is None:
      raise UnexpectedEOFException()
    return word

  def skipWords(self, count):
    for i in range(count):
      self.requireWord()

  def readHeader(self):
    """Return (version, count), or None if the stream has nothing left."""
    version = self.readWord()
    if version is None:
      return None
    if version not in versionNames:
      raise BadVersionException(version)
    self.log("reading ACO stream version: {:s}".format(versionNames[version]))

    count = self.requireWord()
    self.log("{:d} colors in this file".format(count))
    return version, count

  def readName(self):
    namelen = self.requireWord() - 1  # length includes the terminator
    name = []
    ended = False
    for i in range(namelen):
      c = self.requireWord()
      if c > 0xff:  # no real UTF-16 decoding, just keep the column
        c = ord(' ')
      if c == 0:
        ended = True
      if not ended and len(name) < self.nameBufLen - 1:
        name.append(chr(c))
    self.skipWords(1)  # terminator
    return ''.join(name)

  def readColor(self, version):
    """Read one color record.

    Returns an ACOColor, or None when the record isn't RGB. Skipped records
    are still read in full so the next record starts in the right place.
    """
    cspace = self.requireWord()

    if cspace != RGB_COLORSPACE:
      self.skipWords(4)
      if version == 2:
        self.skipWords(1)
        self.skipWords(self.requireWord())
      self.log("Non RGB color (colorspace {:d}) skipped".format(cspace))
      return None

    r = self.requireWord() // 256
    g = self.requireWord() // 256
    b = self.requireWord() // 256
    self.skipWords(1)  # 4th component, unused for RGB
    if version == 1:
      return ACOColor(r, g, b)

    self.skipWords(1)  # unknown
    return ACOColor(r, g, b, self.readName())

  def readColors(self, version, count):
    palette = ACOPalette(version, count)
    for i in range(count):
      color = self.readColor(version)
      if color is not None:
        palette.add_entry(color)
    return palette

  def readACO(self):
    """Read one record set, returns None if the stream is exhausted."""
    header = self.readHeader()
    if header is None:
      return None
    return self.readColors(*header)
