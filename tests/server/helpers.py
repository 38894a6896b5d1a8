"""NMEA sentences for server tests."""

RMC = b"$GPRMC,194533.00,A,5155.32591,N,00234.41370,W,0.159,,160415,,,A*6D\r\n"
GGA = b"$GPGGA,194533.00,5155.32591,N,00234.41370,W,1,10,1.24,63.1,M,48.6,M,,*73\r\n"
VTG = b"$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B\r\n"
