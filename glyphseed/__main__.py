from glyphseed.cli import main

main()
