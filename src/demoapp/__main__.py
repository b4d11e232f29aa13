from demoapp.server import main

main()
