from authcraft.cli import main

main()
