from mongo_init.main import main

main()
