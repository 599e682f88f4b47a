import PaletteCore


class GPLColor(PaletteCore.Color):
  def fromColor(color):
    return GPLColor(color.r, color.g, color.b, getattr(color, 'name', None))

  def __init__(self, r=0, g=0, b=0, name=None):
    super().__init__(r, g, b)
    self.name = name if name is not None else ""

  def __str__(self):
    return "{:d} {:d} {:d} {:s}".format(self.r, self.g, self.b, self.name)


class GPLPalette(PaletteCore.Palette):
  entryType = GPLColor
  header = "GIMP Palette"
  nameKey = "Name: "
  columnsKey = "Columns: "
  defaultName = "Untitled"
  defaultColumns = 16

  def fromPalette(palette, name=defaultName, columns=defaultColumns):
    gplpal = GPLPalette(name, columns)
    gplpal.add_comment(0, "")  # bare '#' between header and colors
    for color in palette.palette:
      gplpal.add_entry(GPLColor.fromColor(color))
    return gplpal

  def __init__(self, name=defaultName, columns=defaultColumns):
    super().__init__()
    self.name = name
    self.columns = columns
    self.comments = list()

  def add_comment(self, line, comment):
    if type(line) is not int or type(comment) is not str:
      raise TypeError
    self.comments.append((line, comment))

  def __iter__(self):
    yield GPLPalette.header
    yield GPLPalette.nameKey + self.name
    yield GPLPalette.columnsKey + str(self.columns)
    curcomment = 0
    for i, color in enumerate(self.palette):
      while curcomment < len(self.comments) and self.comments[curcomment][0] <= i:
        yield "#{:s}".format(self.comments[curcomment][1])
        curcomment += 1
      yield str(color)
    for line, comment in self.comments[curcomment:]:  # trailing comments
      yield "#{:s}".format(comment)

  def write(self, outfile):
    for line in self:
      outfile.write(line + '\n')
