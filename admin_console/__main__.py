from admin_console.main import main

raise SystemExit(main())
