from justcms.cli import main

main()
