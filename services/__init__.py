# Services package for radar sentence processing
