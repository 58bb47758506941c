from skeletree.app import main

main()
