#!/usr/bin/env python3
# Converts a Photoshop .aco palette on stdin to a GIMP palette on stdout.
#   aco2gpl.py < swatches.aco > swatches.gpl

import sys

import ACOFile
import GPLPalette


def convert(infile, outfile, errfile):
  reader = ACOFile.ACOReader(infile, errfile)

  # version 1 data may be followed by the same colors again as version 2,
  # which has names, so the second set wins
  aco1 = reader.readACO()
  aco2 = reader.readACO()

  print("Generating GPL...", file=errfile)
  if aco2 is not None:
    GPLPalette.GPLPalette.fromPalette(aco2).write(outfile)
  elif aco1 is not None:
    GPLPalette.GPLPalette.fromPalette(aco1).write(outfile)
  else:
    print("No data!", file=errfile)
  print("Done.", file=errfile)


def main(infile=None, outfile=None, errfile=None):
  if infile is None:
    infile = sys.stdin.buffer
  if outfile is None:
    outfile = sys.stdout
  if errfile is None:
    errfile = sys.stderr

  try:
    convert(infile, outfile, errfile)
  except ACOFile.ACOException as e:
    print(str(e), file=errfile)
    return 1
  except MemoryError:
    print("Out of memory!", file=errfile)
    return 1
  return 0


def run():
  sys.stdout.reconfigure(encoding='utf-8')
  sys.exit(main())


if __name__ == '__main__':
  run()
