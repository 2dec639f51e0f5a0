from nbody.app import main

main()
