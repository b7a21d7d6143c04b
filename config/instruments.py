"""
Default instrument universe.

Core rows appear in both views; extended rows only in the extended view.
A currency note marks instruments with no GBX/GBP listing.
"""

from domain import InstrumentMetadata, Universe

CORE = Universe.CORE
EXTENDED = Universe.EXTENDED

# (symbol, short name, full name, category, expense ratio %, tier, currency note)
ETF_ROWS: list[tuple[str, str, str, str, float, Universe, str | None]] = [
    # Countries
    # Core
    ("VUKG.L", "UK All-Share", "Vanguard FTSE UK All Share (Acc)", "Countries", 0.06, CORE, None),
    ("CSP1.L", "S&P 500", "iShares Core S&P 500 (Acc)", "Countries", 0.07, CORE, None),
    ("SJPA.L", "Japan", "iShares MSCI Japan (Acc)", "Countries", 0.15, CORE, None),
    ("CG1.L", "Germany", "Amundi DAX III (Acc)", "Countries", 0.08, CORE, None),
    ("CE2D.L", "France", "Amundi MSCI France (Acc)", "Countries", 0.25, CORE, None),
    ("CSCA.L", "Canada", "iShares MSCI Canada (Acc)", "Countries", 0.33, CORE, None),
    ("SAUS.L", "Australia", "iShares MSCI Australia (Acc)", "Countries", 0.44, CORE, None),
    ("CS1.L", "Spain", "Amundi IBEX 35 (Acc)", "Countries", 0.3, CORE, None),
    ("CMB1.L", "Italy", "iShares FTSE MIB (Acc)", "Countries", 0.33, CORE, None),
    ("UC94.L", "Switzerland", "UBS MSCI Switzerland (hGBP Acc)", "Countries", 0.20, CORE, None),
    ("SPOL.L", "Poland", "iShares MSCI Poland (Acc)", "Countries", 0.45, CORE, None),
    ("FRIN.L", "India", "Franklin FTSE India (Acc)", "Countries", 0.19, CORE, None),
    ("HTWN.L", "Taiwan", "HSBC MSCI Taiwan (Acc)", "Countries", 0.15, CORE, None),
    ("XFVT.L", "Vietnam", "Xtrackers FTSE Vietnam (Acc)", "Countries", 0.85, CORE, None),
    ("ITKY.L", "Turkey", "iShares MSCI Turkey (Acc)", "Countries", 0.74, CORE, None),
    ("CMX1.L", "Mexico", "iShares MSCI Mexico Capped (Acc)", "Countries", 0.65, CORE, None),
    ("IKSA.L", "Saudi Arabia", "iShares MSCI Saudi Arabia (Acc)", "Countries", 0.60, CORE, None),
    ("HIDR.L", "Indonesia", "HSBC MSCI Indonesia", "Countries", 0.5, CORE, None),
    ("HMCH.L", "China", "HSBC MSCI China (Dist)", "Countries", 0.28, CORE, None),
    # Extended only
    ("CUKX.L", "FTSE 100", "iShares FTSE 100 (Acc)", "Countries", 0.07, EXTENDED, None),
    ("VMIG.L", "FTSE 250", "Vanguard FTSE 250 (Acc)", "Countries", 0.1, EXTENDED, None),
    ("VNRG.L", "US All-Cap", "Vanguard FTSE North America (Acc)", "Countries", 0.08, EXTENDED, None),
    ("OMXS.L", "Sweden", "iShares OMX Stockholm Capped (Acc)", "Countries", 0.1, EXTENDED, None),
    ("XDN0.L", "Nordic", "Xtrackers MSCI Nordic", "Countries", 0.3, EXTENDED, None),
    ("IAEX.L", "Netherlands", "iShares AEX (Amsterdam 30)", "Countries", 0.3, EXTENDED, None),
    ("FLRK.L", "South Korea", "Franklin FTSE Korea (Acc)", "Countries", 0.09, EXTENDED, None),
    ("FVUB.L", "Brazil", "Franklin FTSE Brazil (Acc)", "Countries", 0.19, EXTENDED, None),
    ("HSTC.L", "Hong Kong", "HSBC Hang Seng Tech (Acc)", "Countries", 0.5, EXTENDED, None),
    ("SRSA.L", "South Africa", "iShares MSCI South Africa (Acc)", "Countries", 0.65, EXTENDED, None),
    ("EWK", "Belgium", "iShares MSCI Belgium (USD)", "Countries", 0.5, EXTENDED, "USD"),
    ("NORW", "Norway", "Global X MSCI Norway (USD)", "Countries", 0.5, EXTENDED, "USD"),
    ("EWO", "Austria", "iShares MSCI Austria (USD)", "Countries", 0.5, EXTENDED, "USD"),
    ("EIRL", "Ireland", "iShares MSCI Ireland (USD)", "Countries", 0.5, EXTENDED, "USD"),
    ("GREK", "Greece", "Global X MSCI Greece (USD)", "Countries", 0.58, EXTENDED, "USD"),
    ("EWS", "Singapore", "iShares MSCI Singapore (USD)", "Countries", 0.5, EXTENDED, "USD"),
    ("THD", "Thailand", "iShares MSCI Thailand (USD)", "Countries", 0.59, EXTENDED, "USD"),
    ("EWM", "Malaysia", "iShares MSCI Malaysia (USD)", "Countries", 0.5, EXTENDED, "USD"),
    ("EPHE", "Philippines", "iShares MSCI Philippines (USD)", "Countries", 0.59, EXTENDED, "USD"),
    ("ENZL", "New Zealand", "iShares MSCI New Zealand (USD)", "Countries", 0.5, EXTENDED, "USD"),
    ("ECH", "Chile", "iShares MSCI Chile (USD)", "Countries", 0.57, EXTENDED, "USD"),
    ("ARGT", "Argentina", "Global X MSCI Argentina (USD)", "Countries", 0.59, EXTENDED, "USD"),
    ("EPU", "Peru", "iShares MSCI Peru (USD)", "Countries", 0.57, EXTENDED, "USD"),
    ("GXG", "Colombia", "Global X MSCI Colombia (USD)", "Countries", 0.61, EXTENDED, "USD"),
    ("UAE", "UAE", "iShares MSCI UAE (USD)", "Countries", 0.5, EXTENDED, "USD"),
    ("EIS", "Israel", "iShares MSCI Israel (USD)", "Countries", 0.59, EXTENDED, "USD"),

    # Broad Regions
    # Core
    ("XMWX.L", "World ex-US", "Xtrackers MSCI World ex USA (Acc)", "Broad Regions", 0.15, CORE, None),
    ("SWDA.L", "World", "iShares MSCI World (Acc)", "Broad Regions", 0.20, CORE, None),
    ("VERX.L", "Europe ex-UK", "Vanguard FTSE Dev Europe ex-UK (Acc)", "Broad Regions", 0.10, CORE, None),
    ("VFEG.L", "Emerg Mkts", "Vanguard FTSE Emerging Markets (Acc)", "Broad Regions", 0.22, CORE, None),
    ("VAPX.L", "Asia Pac ex-JP", "Vanguard FTSE Developed Asia Pac ex-Japan", "Broad Regions", 0.15, CORE, None),
    # Extended only
    ("VWRP.L", "FTSE All-World", "Vanguard FTSE All-World (Acc)", "Broad Regions", 0.22, EXTENDED, None),
    ("VEVE.L", "Developed World", "Vanguard FTSE Developed World", "Broad Regions", 0.12, EXTENDED, None),
    ("MEUD.L", "Europe 600", "Amundi Stoxx Europe 600 (Acc)", "Broad Regions", 0.07, EXTENDED, None),
    ("SX5S.L", "Eurozone", "Invesco Euro Stoxx 50 (Acc)", "Broad Regions", 0.05, EXTENDED, None),
    ("HMEF.L", "Em Markets", "HSBC MSCI Emerging Markets", "Broad Regions", 0.15, EXTENDED, None),
    ("EMXN.L", "EM ex-China", "Amundi MSCI Emerging ex China (Acc)", "Broad Regions", 0.15, EXTENDED, None),
    ("LTAM.L", "EM Lat Am", "iShares MSCI EM Latin America", "Broad Regions", 0.2, EXTENDED, None),
    ("V3AB.L", "World ESG", "Vanguard ESG Global All Cap (Acc)", "Broad Regions", 0.24, EXTENDED, None),
    ("BRIC.L", "Brazil-India-China", "iShares BIC 50", "Broad Regions", 0.74, EXTENDED, None),

    # Sectors US
    # Core
    ("IITU.L", "US Tech", "iShares S&P 500 Tech", "Sectors US", 0.15, CORE, None),
    ("IUCM.L", "US Comms", "iShares S&P 500 Comm", "Sectors US", 0.15, CORE, None),
    ("ICDU.L", "US Cons Disc", "iShares S&P 500 ConsD", "Sectors US", 0.15, CORE, None),
    ("IUCS.L", "US Cons Stap", "iShares S&P 500 ConsS", "Sectors US", 0.15, CORE, None),
    ("IUFS.L", "US Financials", "iShares S&P 500 Finance", "Sectors US", 0.15, CORE, None),
    ("IUHC.L", "US Health", "iShares S&P 500 Health", "Sectors US", 0.15, CORE, None),
    ("IUIS.L", "US Industrials", "iShares S&P 500 Industrials", "Sectors US", 0.15, CORE, None),
    ("IUMS.L", "US Materials", "iShares S&P 500 Materials", "Sectors US", 0.15, CORE, None),
    ("IUSP.L", "US Real Estate", "iShares S&P 500 Real Estate", "Sectors US", 0.15, CORE, None),
    ("XLUP.L", "US Utilities", "Invesco Utilities S&P US Select (Acc)", "Sectors US", 0.14, CORE, None),
    ("IUES.L", "US Energy", "iShares S&P 500 Energy (Acc)", "Sectors US", 0.15, CORE, None),
    # Extended only
    ("XLV", "US Healthcare", "SPDR US Healthcare (USD)", "Sectors US", 0.1, EXTENDED, "USD"),

    # Sectors World
    # Core
    ("XDWT.L", "World Tech", "Xtrackers MSCI World Info Tech", "Sectors World", 0.25, CORE, None),
    ("WCOM.L", "World Comms", "SPDR MSCI World Comm", "Sectors World", 0.30, CORE, None),
    ("XWDS.L", "World Cons Disc", "Xtrackers MSCI World ConsD", "Sectors World", 0.25, CORE, None),
    ("XWCS.L", "World Cons Stap", "Xtrackers MSCI World Consumer Staples", "Sectors World", 0.25, CORE, None),
    ("XDWF.L", "World Financials", "Xtrackers MSCI World Finance", "Sectors World", 0.25, CORE, None),
    ("WHEA.L", "World Health", "SPDR MSCI World Health", "Sectors World", 0.30, CORE, None),
    ("XWIS.L", "World Industrials", "Xtrackers MSCI World Industrials", "Sectors World", 0.25, CORE, None),
    ("WMAT.L", "World Materials", "SPDR MSCI World Materials", "Sectors World", 0.30, CORE, None),
    ("IWDP.L", "World Real Estate", "iShares Dev. Real Estate", "Sectors World", 0.40, CORE, None),
    ("WUTI.L", "World Utilities", "SPDR MSCI World Utilities", "Sectors World", 0.30, CORE, None),
    ("WENS.L", "World Energy", "iShares MSCI World Energy", "Sectors World", 0.30, CORE, None),

    # Sectors Europe
    # Core
    ("ESIT.L", "EU Tech", "iShares MSCI Europe Tech", "Sectors Europe", 0.18, CORE, None),
    ("ESIC.L", "EU Comms", "iShares MSCI Europe Comm", "Sectors Europe", 0.18, CORE, None),
    ("XSD2.L", "EU Cons Disc", "Xtrackers Europe ConsD (Acc)", "Sectors Europe", 0.17, CORE, None),
    ("ESIS.L", "EU Cons Stap", "iShares MSCI Europe Staples", "Sectors Europe", 0.18, CORE, None),
    ("ESIF.L", "EU Financials", "iShares MSCI Europe Finance", "Sectors Europe", 0.18, CORE, None),
    ("ESIH.L", "EU Health", "iShares MSCI Europe Health", "Sectors Europe", 0.18, CORE, None),
    ("ESIN.L", "EU Industrials", "iShares MSCI Europe Industrials", "Sectors Europe", 0.18, CORE, None),
    ("MTRL.L", "EU Materials", "iShares MSCI Europe Materials", "Sectors Europe", 0.35, CORE, None),
    ("IPRP.L", "EU Real Estate", "iShares European Property", "Sectors Europe", 0.40, CORE, None),
    ("UTIL.L", "EU Utilities", "SPDR MSCI Europe Utilities (Dist)", "Sectors Europe", 0.18, CORE, None),
    ("ESIE.L", "EU Energy", "iShares MSCI Europe Energy", "Sectors Europe", 0.18, CORE, None),

    # Factors
    # Core
    ("IUMF.L", "US Momentum", "iShares MSCI USA Momentum", "Factors", 0.15, CORE, None),
    ("IWFM.L", "World Momentum", "iShares MSCI World Momentum", "Factors", 0.30, CORE, None),
    ("IUQF.L", "US Quality", "iShares MSCI USA Quality", "Factors", 0.15, CORE, None),
    ("IWFQ.L", "World Quality", "iShares MSCI World Quality", "Factors", 0.25, CORE, None),
    ("IUVF.L", "US Value", "iShares MSCI USA Value", "Factors", 0.20, CORE, None),
    ("IWFV.L", "World Value", "iShares MSCI World Value", "Factors", 0.30, CORE, None),
    ("IUSF.L", "US Size", "iShares MSCI USA Size Factor", "Factors", 0.15, CORE, None),
    ("IWSZ.L", "World Size", "iShares MSCI World Size Factor", "Factors", 0.30, CORE, None),
    ("ISP6.L", "US Small Cap", "iShares MSCI USA Small Cap 600", "Factors", 0.30, CORE, None),
    ("WLDS.L", "World Small Cap", "iShares MSCI World Small Cap", "Factors", 0.35, CORE, None),
    ("AVCG.L", "Avantis Core", "Avantis Global Equity", "Factors", 0.22, CORE, None),
    ("AVSG.L", "Avantis Sm Val", "Avantis Global Small Cap Value", "Factors", 0.39, CORE, None),
    ("AVEG.L", "Avantis EM Val", "Avantis Emerging Markets Equity", "Factors", 0.33, CORE, None),
    # Extended only
    ("XDEB.L", "World Min Vol", "Xtrackers MSCI World Minimum Volatility", "Factors", 0.25, EXTENDED, None),
    ("JPLG.L", "Global Multi-Fac", "J.P. Morgan Global Equity Multi-Factor", "Factors", 0.2, EXTENDED, None),
    ("GOGB.L", "Global Moat", "VanEck Morningstar Global Moat", "Factors", 0.52, EXTENDED, None),
    ("FLXX.L", "Global Dividend", "Franklin LibertyQ Global Dividend", "Factors", 0.3, EXTENDED, None),
    ("GBDV.L", "Global Div Arist", "SPDR S&P Global Dividend Aristocrats", "Factors", 0.45, EXTENDED, None),
    ("MVUS.L", "US Min Vol", "iShares Edge S&P 500 Min Volatility", "Factors", 0.2, EXTENDED, None),
    ("XDWE.L", "S&P 500 Eq Wt", "Xtrackers S&P 500 Equal Weight", "Factors", 0.15, EXTENDED, None),
    ("QQQA.L", "Nasdaq 100", "UBS Nasdaq-100 (Acc)", "Factors", 0.13, EXTENDED, None),
    ("DHS.L", "US Dividend", "WisdomTree US Equity Income", "Factors", 0.29, EXTENDED, None),
    ("IEFQ.L", "EU Quality", "iShares Edge MSCI Europe Quality Factor", "Factors", 0.25, EXTENDED, None),
    ("IEFM.L", "EU Momentum", "iShares Edge MSCI Europe Momentum Factor", "Factors", 0.25, EXTENDED, None),
    ("IEFV.L", "EU Value", "iShares Edge MSCI Europe Value Factor", "Factors", 0.25, EXTENDED, None),
    ("EEI.L", "EU Dividend", "WisdomTree Europe Equity Income", "Factors", 0.29, EXTENDED, None),
    ("EMV.L", "EM Min Vol", "iShares Edge MSCI EM Min Volatility", "Factors", 0.4, EXTENDED, None),
    ("FEMQ.L", "EM Quality", "Fidelity Emerging Markets Quality Income", "Factors", 0.5, EXTENDED, None),
    ("EMSM.L", "EM Small Cap", "SPDR MSCI Emerging Markets Small Cap", "Factors", 0.55, EXTENDED, None),
    ("JGRE.L", "Global Res Enh", "J.P. Morgan Global Research Enhanced", "Factors", 0.25, EXTENDED, None),

    # Commodities
    # Core
    ("SGLN.L", "Gold", "iShares Physical Gold", "Commodities", 0.12, CORE, None),
    ("GDGB.L", "Gold Miners", "iShares Gold Producers (Acc)", "Commodities", 0.55, CORE, None),
    ("GJGB.L", "Jr Gold Miners", "VanEck Junior Gold Miners (Acc)", "Commodities", 0.55, CORE, None),
    ("SSLN.L", "Silver", "iShares Physical Silver", "Commodities", 0.20, CORE, None),
    ("SILG.L", "Silver Miners", "Global X Silver Miners (Acc)", "Commodities", 0.65, CORE, None),
    ("SPLT.L", "Platinum", "iShares Physical Platinum", "Commodities", 0.20, CORE, None),
    ("SPDM.L", "Palladium", "iShares Physical Palladium", "Commodities", 0.20, CORE, None),
    ("COPB.L", "Copper", "WisdomTree Copper (£)", "Commodities", 0.49, CORE, None),
    ("GDIG.L", "Metal Miners", "VanEck S&P Global Mining (Acc)", "Commodities", 0.50, CORE, None),
    ("BRNG.L", "Oil", "WisdomTree Brent Crude Oil (£)", "Commodities", 0.49, CORE, None),
    ("NGAS.L", "Nat Gas", "WisdomTree Natural Gas (£)", "Commodities", 0.49, CORE, None),
    ("INRG.L", "Clean Energy", "iShares Global Clean Energy", "Commodities", 0.65, CORE, None),
    ("RAYG.L", "Solar", "Global X Solar", "Commodities", 0.50, CORE, None),
    ("URNP.L", "Uranium", "Global X Uranium", "Commodities", 0.65, CORE, None),
    ("NUCG.L", "Nuclear", "VanEck Uranium+Nuclear", "Commodities", 0.55, CORE, None),
    ("LITG.L", "Lithium/Battery", "L&G Battery Value-Chain", "Commodities", 0.49, CORE, None),
    ("IH2O.L", "Clean Water", "iShares Global Water (Acc)", "Commodities", 0.65, CORE, None),
    ("AIGA.L", "Agriculture", "WisdomTree Agriculture", "Commodities", 0.49, CORE, None),
    # Extended only
    ("CMOP.L", "Cmdties Broad", "Invesco Bloomberg Commodity (Acc)", "Commodities", 0.19, EXTENDED, None),
    ("SPOG.L", "Oil & Gas Prod", "iShares Oil & Gas Exploration & Production", "Commodities", 0.55, EXTENDED, None),
    ("METG.L", "Battery Metals", "iShares Essential Metals Producers (Acc)", "Commodities", 0.55, EXTENDED, None),
    ("REGB.L", "Rare Earths", "VanEck Rare Earth and Strategic Metals", "Commodities", 0.59, EXTENDED, None),
    ("SPAG.L", "Agribusiness", "iShares Agribusiness (Acc)", "Commodities", 0.55, EXTENDED, None),

    # Crypto
    # Core
    ("IB1T.L", "Bitcoin", "iShares Bitcoin ETP", "Crypto", 0.15, CORE, None),
    ("ETHW.L", "Ethereum", "WisdomTree Physical Ethereum", "Crypto", 0.35, CORE, None),
    ("BCHS.L", "Blockchain", "Invesco CoinShares Global Blockchain", "Crypto", 0.65, CORE, None),
    ("DAGB.L", "Crypto Firms", "VanEck Crypto & Blockchain Innovators", "Crypto", 0.65, CORE, None),

    # Thematics
    # Core
    ("AIAI.L", "AI", "L&G Artificial Intelligence", "Thematics", 0.49, CORE, None),
    ("SMGB.L", "Semiconductors", "VanEck Semiconductor (Acc)", "Thematics", 0.35, CORE, None),
    ("RBOT.L", "Robotics", "iShares Automation & Robotics", "Thematics", 0.40, CORE, None),
    ("WCLD.L", "Cloud", "WisdomTree Cloud UCITS", "Thematics", 0.40, CORE, None),
    ("ISPY.L", "Cybersecurity", "iShares Cybersecurity (Acc)", "Thematics", 0.35, CORE, None),
    ("ECAR.L", "EV Cars", "iShares Electric Vehicles", "Thematics", 0.40, CORE, None),
    ("DFNG.L", "Defense", "VanEck Defense (Acc)", "Thematics", 0.55, CORE, None),
    ("INFR.L", "Infrastructure", "iShares Global Infrastructure", "Thematics", 0.50, CORE, None),
    ("AGED.L", "Aging Pop", "iShares Aging Population", "Thematics", 0.40, CORE, None),
    ("LOCK.L", "Digital Security", "iShares Digital Security (Acc)", "Thematics", 0.40, CORE, None),
    # Extended only
    ("WREN.L", "Renewable Energy", "WisdomTree Renewable Energy (Acc)", "Thematics", 0.45, EXTENDED, None),
    ("RAYS.L", "Solar Energy", "Invesco Solar Energy (Acc)", "Thematics", 0.69, EXTENDED, None),
    ("HTWG.L", "Hydrogen Econ", "L&G Hydrogen Economy (Acc)", "Thematics", 0.49, EXTENDED, None),
    ("CLMP.L", "Sust Energy", "Guinness Sustainable Energy (Acc)", "Thematics", 0.65, EXTENDED, None),
    ("GCAR.L", "Elec Vehicles", "iShares Electric Vehicles & Driving Tech", "Thematics", 0.4, EXTENDED, None),
    ("CHRG.L", "Battery Tech", "WisdomTree Battery Solutions (Acc)", "Thematics", 0.4, EXTENDED, None),
    ("XAIX.L", "AI & Big Data", "Xtrackers AI & Big Data (Acc)", "Thematics", 0.35, EXTENDED, None),
    ("RBTX.L", "Robotics & Auto", "iShares Automation and Robotics (Acc)", "Thematics", 0.4, EXTENDED, None),
    ("KLWD.L", "Cloud Computing", "WisdomTree Cloud Computing (Acc)", "Thematics", 0.4, EXTENDED, None),
    ("DPAG.L", "Digital Payments", "L&G Digital Payments (Acc)", "Thematics", 0.49, EXTENDED, None),
    ("DRDR.L", "Healthcare Innov", "iShares Healthcare Innovation (Acc)", "Thematics", 0.4, EXTENDED, None),
    ("BTEK.L", "Biotechnology", "iShares Nasdaq US Biotechnology (Acc)", "Thematics", 0.35, EXTENDED, None),
    ("BIGT.L", "Pharma Breakthru", "L&G Pharma Breakthrough (Acc)", "Thematics", 0.49, EXTENDED, None),
    ("AGES.L", "Ageing Pop", "iShares Ageing Population (Acc)", "Thematics", 0.4, EXTENDED, None),
    ("EDOG.L", "Digital Health", "Global X Telemedicine & Digital Health", "Thematics", 0.68, EXTENDED, None),
    ("CIRC.L", "Circular Economy", "Rize Circular Economy Enablers (Acc)", "Thematics", 0.45, EXTENDED, None),
    ("HPRO.L", "Global REIT", "HSBC FTSE EPRA NAREIT Developed", "Thematics", 0.24, EXTENDED, None),
    ("LUXG.L", "Global Luxury", "Amundi S&P Global Luxury (Acc)", "Thematics", 0.25, EXTENDED, None),
    ("DFND.L", "Aerospace & Def", "iShares Global Aerospace & Defence (Acc)", "Thematics", 0.35, EXTENDED, None),
    ("WDEP.L", "Europe Defence", "WisdomTree Europe Defence (Acc)", "Thematics", 0.4, EXTENDED, None),
    ("JEDG.L", "Space Tech", "VanEck Space Innovators (Acc)", "Thematics", 0.55, EXTENDED, None),
    ("QNTG.L", "Quantum Comp", "VanEck Quantum Computing (Acc)", "Thematics", 0.55, EXTENDED, None),
    ("ESGB.L", "Gaming & Esports", "VanEck Video Gaming and eSports (Acc)", "Thematics", 0.55, EXTENDED, None),
    ("XLPE.L", "Private Equity", "Xtrackers LPX Private Equity Swap (Acc)", "Thematics", 0.7, EXTENDED, None),
    ("TRIP.L", "Global Travel", "US Global Investors Travel (Acc)", "Thematics", 0.69, EXTENDED, None),

    # Bonds
    # Core
    ("CSH2.L", "UK Cash", "Amundi Smart Overnight", "Bonds", 0.05, CORE, None),
    ("IGL5.L", "UK Gilts 0-5Y", "iShares UK Gilts 0-5yr (Acc)", "Bonds", 0.07, CORE, None),
    ("VGVA.L", "UK Gilts Med", "Vanguard U.K. Gilt (Acc)", "Bonds", 0.05, CORE, None),
    ("IGLT.L", "UK Gilts Broad", "iShares Core UK Gilts", "Bonds", 0.07, CORE, None),
    ("VAGS.L", "Global Bonds", "Vanguard Global Aggregate (hGBP Acc)", "Bonds", 0.10, CORE, None),
    ("IBTG.L", "US Treas 1-3Y", "iShares $ Treas 1-3yr (hGBP Dist)", "Bonds", 0.10, CORE, None),
    ("IGTM.L", "US Treas 7-10Y", "iShares $ Treas 7-10yr (hGBP Dist)", "Bonds", 0.10, CORE, None),
    ("IDGA.L", "US Treas 20Y+", "iShares $ Treas 20+yr (hGBP Acc)", "Bonds", 0.10, CORE, None),
    ("IS15.L", "UK Corp 0-5Y", "iShares £ Corp Bond 0-5yr", "Bonds", 0.20, CORE, None),
    # Extended only
    ("VUTA.L", "US Treas Broad", "Vanguard USD Treasury Bonds (Acc)", "Bonds", 0.05, EXTENDED, None),
    ("PRIG.L", "Global Govt Bond", "Amundi Prime Global Government Bond", "Bonds", 0.05, EXTENDED, None),
    ("PRIR.L", "Euro Govt Bond", "Amundi Euro Government Bonds", "Bonds", 0.05, EXTENDED, None),
    ("JRBU.L", "USD Corp IG", "J.P. Morgan USD IG Corporate Bond (Acc)", "Bonds", 0.04, EXTENDED, None),
    ("VECP.L", "EUR Corp IG", "Vanguard EUR Corporate Bond", "Bonds", 0.07, EXTENDED, None),
    ("XUHG.L", "USD High Yield", "Xtrackers USD High Yield Corporate Bond", "Bonds", 0.25, EXTENDED, None),
    ("GHYS.L", "Global Hi Yield", "iShares Global High Yield Corporate Bond", "Bonds", 0.55, EXTENDED, None),
    ("SBEM.L", "EM Sov Bond", "UBS Emerging Markets Sovereign Bonds", "Bonds", 0.25, EXTENDED, None),
    ("GILI.L", "UK Inflation Lnk", "Amundi UK Government Inflation-Linked Bond", "Bonds", 0.07, EXTENDED, None),
    ("IBCI.L", "EUR Inflation Lnk", "iShares EUR Inflation Linked Govt Bond", "Bonds", 0.09, EXTENDED, None),
]

# Annualized from its 1M return when FRED is unavailable
RISK_FREE_PROXY = "CSH2.L"


def default_instruments() -> list[InstrumentMetadata]:
    """Build metadata for every row, in category order."""
    return [
        InstrumentMetadata(
            symbol=symbol,
            short_name=short_name,
            full_name=full_name,
            category=category,
            expense_ratio=ter,
            tier=tier,
            currency_note=note,
        )
        for symbol, short_name, full_name, category, ter, tier, note in ETF_ROWS
    ]
