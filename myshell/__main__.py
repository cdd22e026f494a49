from myshell.main import main

raise SystemExit(main())
