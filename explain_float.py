#!/usr/bin/env python3
import sys, tinyfp.tinyfp_explain
sys.exit(tinyfp.tinyfp_explain.main())
