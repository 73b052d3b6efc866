from wikitop.main import main

main()
