from routemap.cli import main

main()
