from project_pulse.cli.main import main

raise SystemExit(main())
