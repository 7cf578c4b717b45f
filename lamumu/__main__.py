from lamumu.main import main

main()
