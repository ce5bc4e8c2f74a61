# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Internal implementation package for fluentseq; import from the public modules."""
