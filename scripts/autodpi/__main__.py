from autodpi.launch import main

raise SystemExit(main())
