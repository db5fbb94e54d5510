from html_prototype.cli import main

main()
