from takeaway.main import main

main()
