from omdbsearch.main import main

main()
