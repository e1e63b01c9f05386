from roster.main import main

raise SystemExit(main())
