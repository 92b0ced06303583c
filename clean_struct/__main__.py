from clean_struct.cli import main

main()
