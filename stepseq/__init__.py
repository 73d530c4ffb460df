"""stepseq -- sequential step execution with halt handling."""
