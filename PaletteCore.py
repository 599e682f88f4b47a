def checkChannel(value):
  if type(value) is not int:
    raise TypeError
  if value < 0 or value > 255:
    raise ValueError
  return value


class Color:
  @property
  def r(self):
    return self._r

  @property
  def g(self):
    return self._g

  @property
  def b(self):
    return self._b

  def __init__(self, r=0, g=0, b=0):
    self._r = checkChannel(r)
    self._g = checkChannel(g)
    self._b = checkChannel(b)

  def __eq__(self, other):
    if not isinstance(other, Color):
      return NotImplemented
    return (self.r, self.g, self.b) == (other.r, other.g, other.b)

  def __hash__(self):
    return hash((self.r, self.g, self.b))

  def __repr__(self):
    return "{:s}({:d}, {:d}, {:d})".format(type(self).__name__, self.r, self.g, self.b)


class Palette:
  entryType = Color

  def __init__(self):
    self.palette = list()

  def add_entry(self, color):
    if not isinstance(color, self.entryType):
      raise TypeError
    self.palette.append(color)

  def __len__(self):
    return len(self.palette)
