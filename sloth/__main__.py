from sloth.cmdline import main

main()
