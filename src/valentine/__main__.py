from valentine.loop import main

main()
