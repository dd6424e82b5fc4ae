"""VSOP87D periodic terms for Neptune.

Heliocentric ecliptic spherical coordinates referred to the ecliptic
and equinox of the date.  Each slot ``Xn`` holds the terms multiplying
``t**n`` for coordinate ``X`` (L = longitude [rad], B = latitude [rad],
R = radius vector [AU]) as ``(A, B, C)`` rows contributing
``A * cos(B + C * t)``, with *t* in Julian millennia from J2000.

Only the powers used by the solution are listed (1922 terms in total).

References:
    P. Bretagnon & G. Francou, "Planetary theories in rectangular and
    spherical variables. VSOP87 solutions", A&A 202, 309-315 (1988).
"""

# fmt: off

L0 = (
    (5.31188633047, 0.00000000000, 0.00000000000),
    (0.01798475509, 2.90101273050, 38.13303563780),
    (0.01019727662, 0.48580923660, 1.48447270830),
    (0.00124531845, 4.83008090682, 36.64856292950),
    (0.00042064450, 5.41054991607, 2.96894541660),
    (0.00037714589, 6.09221834946, 35.16409022120),
    (0.00033784734, 1.24488865578, 76.26607127560),
    (0.00016482741, 0.00007729261, 491.55792945680),
    (0.00009198582, 4.93747059924, 39.61750834610),
    (0.00008994249, 0.27462142569, 175.16605980020),
    (0.00004216235, 1.98711914364, 73.29712585900),
    (0.00003364818, 1.03590121818, 33.67961751290),
    (0.00002284800, 4.20606932559, 4.45341812490),
    (0.00001433512, 2.78340432711, 74.78159856730),
    (0.00000900240, 2.07606702418, 109.94568878850),
    (0.00000744996, 3.19032530145, 71.81265315070),
    (0.00000506206, 5.74785370252, 114.39910691340),
    (0.00000399552, 0.34972342569, 1021.24889455140),
    (0.00000345195, 3.46186210169, 41.10198105440),
    (0.00000306338, 0.49684039897, 0.52126486180),
    (0.00000287322, 4.50523446022, 0.04818410980),
    (0.00000323004, 2.24815188609, 32.19514480460),
    (0.00000340323, 3.30369900416, 77.75054398390),
    (0.00000266605, 4.88932609483, 0.96320784650),
    (0.00000227079, 1.79713054538, 453.42489381900),
    (0.00000244722, 1.24693337933, 9.56122755560),
    (0.00000232887, 2.50459795017, 137.03302416240),
    (0.00000282170, 2.24565579693, 146.59425171800),
    (0.00000251941, 5.78166597292, 388.46515523820),
    (0.00000150180, 2.99706110414, 5.93789083320),
    (0.00000170404, 3.32390630650, 108.46121608020),
    (0.00000151401, 2.19153094280, 33.94024994380),
    (0.00000148295, 0.85948986145, 111.43016149680),
    (0.00000118672, 3.67706204305, 2.44768055480),
    (0.00000101821, 5.70539236951, 0.11187458460),
    (0.00000097873, 2.80518260528, 8.07675484730),
    (0.00000103054, 4.40441222000, 70.32818044240),
    (0.00000103305, 0.04078966679, 0.26063243090),
    (0.00000109300, 2.41599378049, 183.24281464750),
    (0.00000073938, 1.32805041516, 529.69096509460),
    (0.00000077725, 4.16446516424, 4.19278569400),
    (0.00000086379, 4.22834506045, 490.07345674850),
    (0.00000081536, 5.19908046216, 493.04240216510),
    (0.00000071503, 5.29530386579, 350.33211960040),
    (0.00000064418, 3.54541016050, 168.05251279940),
    (0.00000062570, 0.15028731465, 182.27960680100),
    (0.00000058488, 3.50106873945, 145.10977900970),
    (0.00000048276, 1.11259925628, 112.91463420510),
    (0.00000047229, 4.57373229818, 46.20979048510),
    (0.00000039124, 1.66569356050, 213.29909543800),
    (0.00000047728, 0.12906212461, 484.44438245600),
    (0.00000046858, 3.01699530327, 498.67147645760),
    (0.00000038659, 2.38685706479, 2.92076130680),
    (0.00000047046, 4.49844660400, 173.68158709190),
    (0.00000047565, 2.58404814824, 219.89137757700),
    (0.00000044714, 5.47302733614, 176.65053250850),
    (0.00000032279, 3.45759151220, 30.71067209630),
    (0.00000028249, 4.13282446716, 6.59228213900),
    (0.00000024433, 4.55736848232, 106.97674337190),
    (0.00000024661, 3.67822620786, 181.75834193920),
    (0.00000024505, 1.55095867965, 7.11354700080),
    (0.00000021848, 1.04366818343, 39.09624348430),
    (0.00000016936, 6.10896452834, 44.72531777680),
    (0.00000022169, 2.74932970271, 256.53994050650),
    (0.00000016614, 4.98188930613, 37.61177077600),
    (0.00000017728, 3.55049134167, 1.37259812370),
    (0.00000017347, 2.14069234880, 42.58645376270),
    (0.00000014953, 3.36405649131, 98.89998852460),
    (0.00000014566, 0.69857991985, 1550.93985964600),
    (0.00000015676, 6.22010212025, 454.90936652730),
    (0.00000013243, 5.61712542227, 68.84370773410),
    (0.00000014837, 3.52557245517, 25.60286266560),
    (0.00000012757, 0.04509743861, 11.04570026390),
    (0.00000011988, 4.81687553351, 24.11838995730),
    (0.00000011060, 1.78958277553, 7.42236354150),
    (0.00000012108, 1.87022663714, 79.23501669220),
    (0.00000011698, 0.49005698002, 1.59634729290),
    (0.00000010459, 2.38743199893, 381.35160823740),
    (0.00000011681, 3.85151357766, 218.40690486870),
    (0.00000008744, 0.14168568610, 148.07872442630),
    (0.00000009196, 1.00274090619, 72.07328558160),
    (0.00000011343, 0.81432278263, 525.49817940060),
    (0.00000010097, 5.03383557061, 601.76425067620),
    (0.00000008035, 1.77685723010, 0.21244832110),
    (0.00000008382, 3.07534786987, 1.27202438720),
    (0.00000010803, 2.92081211459, 293.18850343600),
    (0.00000007666, 1.52223325105, 115.88357962170),
    (0.00000007531, 5.37537256533, 5.10780943070),
    (0.00000008691, 4.74352784364, 143.62530630140),
    (0.00000010183, 1.15395455831, 6244.94281435360),
    (0.00000008283, 0.35956716764, 138.51749687070),
    (0.00000009544, 4.02452832984, 152.53214255120),
    (0.00000007274, 4.10937535938, 251.43213107580),
    (0.00000007465, 1.72131945843, 31.01948863700),
    (0.00000006902, 4.62452068308, 2.70831298570),
    (0.00000007094, 5.11528393609, 312.19908396260),
    (0.00000007929, 2.10765101655, 27.08733537390),
    (0.00000006156, 3.50746507109, 28.57180808220),
    (0.00000007134, 2.05292376023, 278.25883401880),
    (0.00000008193, 2.58588219154, 141.22580985640),
    (0.00000005499, 2.09250039025, 1.69692102940),
    (0.00000005279, 4.09390686798, 983.11585891360),
    (0.00000006947, 3.48041784595, 415.29185818120),
    (0.00000005916, 0.68957324226, 62.25142559510),
    (0.00000005925, 4.02504592620, 255.05546779820),
    (0.00000004606, 1.17779101436, 43.24084506850),
    (0.00000005357, 3.63061058987, 5.41662597140),
    (0.00000005918, 2.57693824084, 10175.15251057320),
    (0.00000005482, 3.07979737280, 329.83706636550),
    (0.00000003956, 5.00418696742, 184.72728735580),
    (0.00000005408, 3.31313295602, 528.20649238630),
    (0.00000004767, 4.91981150665, 456.39383923560),
    (0.00000003770, 1.57277409442, 32.71640966640),
    (0.00000003924, 4.92763242635, 180.27386923090),
    (0.00000003707, 4.82965453201, 221.37585028530),
    (0.00000003802, 4.96279204998, 594.65070367540),
    (0.00000004014, 1.63905164030, 40.58071619260),
    (0.00000003061, 0.39713858313, 1.43628859850),
    (0.00000003261, 4.65478978469, 29.22619938800),
    (0.00000003474, 5.65891305944, 395.57870223900),
    (0.00000002918, 5.91079083895, 1.22384027740),
    (0.00000003649, 3.88114678609, 494.52687487340),
    (0.00000003225, 5.57423738665, 1014.13534755060),
    (0.00000002845, 0.56009386585, 144.14657116320),
    (0.00000002848, 0.55423029727, 567.82400073240),
    (0.00000003440, 1.70887250883, 12.53017297220),
    (0.00000003267, 5.63287799820, 488.58898404020),
    (0.00000003107, 5.79335949207, 105.49227066360),
    (0.00000002712, 2.43726364359, 60.76695288680),
    (0.00000003202, 2.21483496593, 41.05379694460),
    (0.00000003134, 4.69665220513, 82.85835341460),
    (0.00000003590, 5.69939670162, 1124.34166877000),
    (0.00000002967, 0.54448940101, 135.54855145410),
    (0.00000003211, 4.19927605853, 291.70403072770),
    (0.00000002899, 5.99669788291, 22.63391724900),
    (0.00000003143, 2.93495725805, 31.23193695810),
    (0.00000002729, 4.62707721219, 5.62907429250),
    (0.00000002513, 5.60391563025, 19.12245511120),
    (0.00000002690, 5.32070128202, 2.00573757010),
    (0.00000002630, 6.00855841124, 37.16982779130),
    (0.00000002296, 6.06934502789, 451.94042111070),
    (0.00000002858, 4.88677262419, 258.02441321480),
    (0.00000002879, 5.12239168488, 38.65430049960),
    (0.00000002270, 2.08634524182, 30.05628079050),
    (0.00000002301, 3.35951602914, 1028.36244155220),
    (0.00000003001, 3.59143817947, 211.81462272970),
    (0.00000002237, 0.38455553470, 3.62333672240),
    (0.00000002901, 3.24755614136, 366.48562929500),
    (0.00000002592, 1.36262641469, 35.42472265210),
    (0.00000002418, 4.93467056526, 47.69426319340),
    (0.00000002089, 5.79838063413, 4.66586644600),
    (0.00000002586, 2.69392971321, 38.18121974760),
    (0.00000001913, 5.53560681085, 149.56319713460),
    (0.00000001971, 6.00790964671, 34.20088237470),
    (0.00000002586, 6.24984047544, 38.08485152800),
    (0.00000002098, 4.57819744766, 1019.76442184310),
    (0.00000001869, 3.85907708723, 911.04257333200),
    (0.00000002486, 5.21235809332, 140.00196957900),
    (0.00000001795, 1.68012868451, 1059.38193018920),
    (0.00000002326, 2.82664069146, 807.94979911340),
    (0.00000001984, 5.54763522932, 1022.73336725970),
    (0.00000001919, 5.10717766499, 216.92243216040),
    (0.00000002004, 5.47811228948, 63.73589830340),
    (0.00000002021, 4.15631916516, 178.13500521680),
    (0.00000001760, 6.00927149342, 172.19711438360),
    (0.00000002140, 2.65037925793, 700.66423920080),
    (0.00000001988, 3.35850272780, 186.21176006410),
    (0.00000001956, 5.01527508588, 294.67297614430),
    (0.00000001966, 4.07957525462, 20.60692781950),
    (0.00000001637, 0.53823942149, 67.35923502580),
    (0.00000001540, 2.62327849119, 41.75637236020),
    (0.00000001810, 5.81430038477, 129.91947716160),
    (0.00000001776, 4.37047808449, 328.35259365720),
    (0.00000001460, 2.63664516309, 2.85707083200),
    (0.00000001388, 2.10598045632, 3.93215326310),
    (0.00000001352, 0.55618245459, 0.65439130580),
    (0.00000001668, 2.77543377384, 16.15350969460),
    (0.00000001338, 0.37643611305, 14.01464568050),
    (0.00000001218, 0.73456434750, 426.59819087600),
    (0.00000001531, 4.54891769768, 526.72201967800),
    (0.00000001610, 3.40993944436, 403.13419222450),
    (0.00000001361, 4.48227243414, 17.63798240290),
    (0.00000001589, 5.59323020112, 3302.47939106200),
    (0.00000001132, 5.64520725360, 151.04766984290),
    (0.00000001357, 4.06399031430, 26.82670294300),
    (0.00000001494, 4.98692049495, 666.72398925700),
    (0.00000001077, 4.30911470250, 0.63313944640),
    (0.00000001042, 6.02756893581, 106.01353552540),
    (0.00000001060, 0.74679491358, 487.36514376280),
    (0.00000001310, 3.78526380930, 386.98068252990),
    (0.00000001342, 4.52685061062, 563.63121503840),
    (0.00000000986, 0.00600924269, 81.37388070630),
    (0.00000001232, 5.17443930901, 331.32153907380),
    (0.00000000929, 4.51267465978, 38.39366806870),
    (0.00000000956, 3.50447791020, 64.95973858080),
    (0.00000000929, 4.43109514438, 37.87240320690),
    (0.00000000926, 6.09803297747, 4.14460158420),
    (0.00000000972, 0.59038366513, 8.90683624980),
    (0.00000001246, 4.69840351226, 389.94962794650),
    (0.00000001009, 5.98451242784, 142.14083359310),
    (0.00000001020, 0.83233892300, 39.35687591520),
    (0.00000001013, 0.37845630298, 36.90919536040),
    (0.00000000940, 2.42688145966, 343.21857259960),
    (0.00000000974, 5.23958752786, 253.57099508990),
    (0.00000000964, 5.09748190218, 357.44566660120),
    (0.00000000835, 1.45568626670, 35.21227433100),
    (0.00000001077, 0.71409061316, 44.07092647100),
    (0.00000001083, 2.27578897621, 6.90109867970),
    (0.00000000938, 5.03471583911, 69.36497259590),
    (0.00000001078, 1.20253141912, 35.68535508300),
    (0.00000001027, 0.18243183397, 84.34282612290),
    (0.00000000764, 4.62720907712, 0.83008140250),
    (0.00000001013, 0.42234855022, 32.45577723550),
    (0.00000000939, 4.50445799766, 365.00115658670),
    (0.00000000756, 0.82872484717, 17.52610781830),
    (0.00000000916, 3.89409205418, 38.24491022240),
    (0.00000000736, 4.78125743795, 5.36844186160),
    (0.00000000762, 0.01897337130, 189.39315380180),
    (0.00000000738, 2.31770478416, 42.32582133180),
    (0.00000000860, 4.82440483506, 210.33015002140),
    (0.00000000888, 3.20360339895, 348.84764689210),
    (0.00000000916, 5.04967792934, 38.02116105320),
    (0.00000000638, 0.63267396269, 244.31858407500),
    (0.00000000636, 1.02615137352, 2080.63082474060),
    (0.00000000774, 5.44432678139, 367.97010200330),
    (0.00000000644, 1.94044989547, 446.31134681820),
    (0.00000000631, 4.82928491724, 460.53844081980),
    (0.00000000855, 3.57592750113, 439.78275515400),
    (0.00000000678, 4.48687912809, 351.81659230870),
    (0.00000000724, 4.89141609280, 119.50691634410),
    (0.00000000594, 0.59315717529, 491.03666459500),
    (0.00000000655, 1.99014093000, 19.01058052660),
    (0.00000000580, 2.57189536188, 492.07919431860),
    (0.00000000694, 0.08328521209, 5.67725840230),
    (0.00000000733, 5.81485239057, 29.74746424980),
    (0.00000000666, 3.42196897591, 179.09821306330),
    (0.00000000678, 0.29428615814, 171.23390653710),
    (0.00000000635, 2.13805182663, 164.12035953630),
    (0.00000000623, 5.61454940380, 285.37238101960),
    (0.00000000529, 1.88063108785, 416.77633088950),
    (0.00000000529, 5.13250788030, 697.74347789400),
    (0.00000000500, 1.49548514415, 704.85702489480),
    (0.00000000487, 4.97772067947, 274.06604832480),
    (0.00000000666, 6.26456825266, 1474.67378837040),
    (0.00000000532, 0.25784352716, 477.33083545520),
    (0.00000000557, 0.71378452161, 80.71948940050),
    (0.00000000556, 2.60791360513, 418.26080359780),
    (0.00000000584, 4.29064541383, 16.67477455640),
    (0.00000000524, 5.42759392280, 290.21955801940),
    (0.00000000524, 0.29054995359, 247.23934538180),
    (0.00000000541, 4.36400580938, 815.06334611420),
    (0.00000000526, 1.66512720297, 97.41551581630),
    (0.00000000497, 4.72640318293, 401.64971951620),
    (0.00000000432, 2.98481475894, 100.38446123290),
    (0.00000000382, 0.28067758468, 8.38557138800),
    (0.00000000424, 6.16774845481, 178.78939652260),
    (0.00000000484, 0.01535318279, 738.79727483860),
    (0.00000000518, 4.48916591410, 875.83029900100),
    (0.00000000506, 5.38611121207, 404.61866493280),
    (0.00000000396, 4.62747640832, 6.15033915430),
    (0.00000000466, 0.23340415764, 120.99138905240),
    (0.00000000409, 3.08849480895, 59.28248017850),
    (0.00000000470, 5.01853200224, 313.68355667090),
    (0.00000000442, 3.68919475089, 457.87831194390),
    (0.00000000384, 3.69499925394, 160.93896579860),
    (0.00000000364, 0.76192181046, 104.00779795530),
    (0.00000000416, 0.26652109651, 103.09277421860),
    (0.00000000401, 4.06530055968, 14.66903698630),
    (0.00000000454, 3.72767803715, 476.43131808350),
    (0.00000000434, 0.33533802200, 984.60033162190),
    (0.00000000340, 0.99915726716, 31.54075349880),
    (0.00000000420, 3.65147769268, 20.49505323490),
    (0.00000000334, 0.35121412008, 1227.43444298860),
    (0.00000000323, 5.45836731979, 918.15612033280),
    (0.00000000407, 4.19457842203, 309.79958751760),
    (0.00000000381, 0.01364856960, 495.49008271990),
    (0.00000000334, 4.05924071124, 8.33738727820),
    (0.00000000380, 3.17063415023, 487.62577619370),
    (0.00000000309, 0.48352303405, 118.02244363580),
    (0.00000000380, 2.70238752925, 134.11226285560),
    (0.00000000362, 4.88985810610, 438.29828244570),
    (0.00000000327, 2.91090790412, 505.78502345840),
    (0.00000000308, 0.96082817124, 21.14944454070),
    (0.00000000288, 1.48123872077, 220.41264243880),
    (0.00000000293, 2.56582281789, 662.53120356300),
    (0.00000000331, 4.37715965811, 180.79513409270),
    (0.00000000326, 2.46104924164, 169.53698550770),
    (0.00000000289, 2.63591886391, 55.77101804070),
    (0.00000000288, 5.02487283285, 1440.73353842660),
    (0.00000000344, 1.48930997270, 166.56804009110),
    (0.00000000266, 0.63672427386, 79.18683258240),
    (0.00000000268, 5.02354540478, 377.41945497430),
    (0.00000000308, 1.50185265748, 77.22927912210),
    (0.00000000324, 5.30240189273, 457.61767951300),
    (0.00000000265, 1.08736632800, 450.45594840240),
    (0.00000000264, 0.83337660655, 488.37653571910),
    (0.00000000290, 1.80003152563, 101.86893394120),
    (0.00000000262, 2.30390003360, 494.73932319450),
    (0.00000000325, 5.52669889053, 441.26722786230),
    (0.00000000254, 0.02963623277, 117.36805233000),
    (0.00000000300, 0.17435705540, 252.91660378410),
    (0.00000000315, 5.34885013040, 183.76407950930),
    (0.00000000313, 5.45945846595, 13.49338081870),
    (0.00000000306, 5.23085809622, 45.24658263860),
    (0.00000000237, 0.32676889138, 208.84567731310),
    (0.00000000263, 2.66670785888, 464.73122651380),
    (0.00000000234, 1.82700149824, 52175.80628314840),
    (0.00000000275, 5.04385701142, 156.15547927360),
    (0.00000000265, 5.64967127743, 326.86812094890),
    (0.00000000247, 1.74540930625, 65.87476231750),
    (0.00000000269, 6.09827783249, 1654.03263386460),
    (0.00000000229, 2.25832077914, 190.66517818900),
    (0.00000000294, 5.45249564193, 206.18554843720),
    (0.00000000238, 1.55647021369, 79.88940799800),
    (0.00000000230, 6.13158632762, 178.34745353790),
    (0.00000000274, 4.10829870815, 518.38463239980),
    (0.00000000225, 3.86300359251, 171.98466606250),
    (0.00000000228, 2.48511565618, 12566.15169998280),
    (0.00000000272, 5.61149862463, 148.33935685720),
    (0.00000000214, 1.45987216039, 522.57741809380),
    (0.00000000211, 4.04791980901, 6205.32530600750),
    (0.00000000266, 0.99036038827, 209.10630974400),
    (0.00000000230, 0.54049951530, 532.61172640140),
    (0.00000000226, 3.84152961620, 283.62727588040),
    (0.00000000243, 5.32730346969, 485.92885516430),
    (0.00000000209, 4.35051470487, 536.80451209540),
    (0.00000000232, 3.01948719112, 10.93382567930),
    (0.00000000264, 5.70536379124, 490.33408917940),
    (0.00000000280, 3.99993658196, 674.80074410430),
    (0.00000000246, 0.37698964335, 157.63995198190),
    (0.00000000219, 5.67679857772, 52099.54021187280),
    (0.00000000251, 1.52353965506, 6.85291456990),
    (0.00000000203, 5.44328656642, 145.63104387150),
    (0.00000000238, 0.96169723853, 497.18700374930),
    (0.00000000219, 4.52300776062, 1615.89959822680),
    (0.00000000275, 2.37619210741, 2118.76386037840),
    (0.00000000258, 5.12448148780, 608.87779767700),
    (0.00000000260, 3.88543008475, 513.07988101300),
    (0.00000000191, 3.72574595369, 65.22037101170),
    (0.00000000211, 0.06484535455, 215.43795945210),
    (0.00000000236, 3.95835282821, 141.48644228730),
    (0.00000000189, 5.28135043909, 377.15882254340),
    (0.00000000243, 4.35559878377, 482.95990974770),
    (0.00000000243, 6.06808644973, 154.01661525950),
    (0.00000000249, 1.57215637373, 14.22709400160),
    (0.00000000238, 1.93340192445, 500.15594916590),
    (0.00000000209, 5.02893682321, 364.55921360200),
    (0.00000000227, 5.72984298540, 1543.82631264520),
    (0.00000000217, 2.45036922991, 187.17496791060),
    (0.00000000181, 1.65699502247, 1627.20593092160),
    (0.00000000214, 1.60213179145, 11.30633269480),
    (0.00000000203, 0.74638490279, 14.55716240170),
    (0.00000000192, 3.17719161639, 343.47920503050),
    (0.00000000177, 1.50027795761, 9.44935297100),
    (0.00000000177, 0.03038098292, 165.60483224460),
    (0.00000000176, 4.64462444674, 315.16802937920),
    (0.00000000208, 2.65835778368, 496.01134758170),
    (0.00000000174, 2.76155855705, 49.17873590170),
    (0.00000000196, 1.95549714182, 335.77495719870),
    (0.00000000200, 4.16839394758, 285.11174858870),
    (0.00000000199, 0.06168021293, 73.55775828990),
    (0.00000000188, 6.17288913873, 535.32003938710),
    (0.00000000215, 1.92414563346, 552.69738935910),
    (0.00000000166, 5.49038139690, 10135.53500222710),
    (0.00000000192, 0.96973434120, 304.23420369990),
    (0.00000000209, 5.34065233845, 13.64213866500),
    (0.00000000203, 5.11234865419, 324.72925693480),
    (0.00000000177, 3.50680841790, 207.36120460480),
    (0.00000000174, 1.95010708561, 319.31263096340),
    (0.00000000187, 5.57685931698, 266.10116806210),
    (0.00000000181, 1.43525075751, 279.74330672710),
    (0.00000000165, 4.00537112057, 493.56366702690),
    (0.00000000191, 1.68313683465, 563.37058260750),
    (0.00000000173, 3.93200456456, 238.90195810360),
    (0.00000000161, 5.96143146317, 36.12729806770),
    (0.00000000194, 2.37664231450, 944.98282327580),
    (0.00000000165, 0.97421918976, 556.51766803760),
    (0.00000000189, 1.11279570541, 1127.26243007680),
    (0.00000000172, 0.75085513952, 267.58564077040),
    (0.00000000193, 2.12636756833, 20350.30502114640),
    (0.00000000181, 2.10814562080, 113.87784205160),
    (0.00000000194, 1.13504964219, 57.25549074900),
    (0.00000000181, 6.23699820519, 355.96119389290),
    (0.00000000198, 5.68125942959, 6280.10690457480),
    (0.00000000173, 5.15083799917, 474.94684537520),
    (0.00000000151, 1.66981962338, 116.53797092750),
    (0.00000000150, 5.42593657173, 526.98265210890),
    (0.00000000205, 4.16096717573, 711.44930703380),
    (0.00000000177, 3.49360697678, 421.22974901440),
    (0.00000000168, 0.52839230204, 487.10451133190),
    (0.00000000160, 4.77712663799, 524.01370669230),
    (0.00000000145, 2.81448128781, 1512.80682400820),
    (0.00000000146, 4.99570112660, 142.66209845490),
    (0.00000000188, 0.82104161550, 10210.31660079440),
    (0.00000000145, 4.96888131586, 1189.30140735080),
    (0.00000000181, 2.99704790590, 75.74480641380),
    (0.00000000176, 0.41626373842, 222.86032299360),
    (0.00000000137, 2.96534226337, 6206.80977871580),
    (0.00000000138, 1.22260849471, 187.69623277240),
    (0.00000000128, 2.53394068407, 276.77436131050),
    (0.00000000130, 3.04810765699, 310.71461125430),
    (0.00000000122, 3.01323006886, 70.84944530420),
    (0.00000000111, 0.77449448649, 179.35884549420),
    (0.00000000141, 0.18423889807, 131.40394986990),
    (0.00000000126, 5.77648809669, 525.23754696970),
    (0.00000000124, 2.93225731024, 179.61947792510),
    (0.00000000111, 6.18471578216, 981.63138620530),
    (0.00000000141, 2.63342951123, 381.61224066830),
    (0.00000000110, 5.25053027081, 986.08480433020),
    (0.00000000096, 3.86591534559, 240.12579838100),
    (0.00000000120, 3.78755085035, 1057.89745748090),
    (0.00000000093, 4.54014016637, 36.69674703930),
    (0.00000000109, 1.53327585900, 419.74527630610),
    (0.00000000094, 4.21870300178, 1024.21783996800),
    (0.00000000109, 2.15905156247, 289.56516671360),
    (0.00000000104, 0.20665642552, 564.85505531580),
    (0.00000000081, 1.89134135215, 36.60037881970),
    (0.00000000080, 4.38832594589, 10137.01947493540),
    (0.00000000080, 1.73940577376, 39.50563376150),
    (0.00000000084, 0.81316746605, 170.71264167530),
    (0.00000000090, 0.60145818457, 36.76043751410),
    (0.00000000074, 4.92511651321, 1549.45538693770),
    (0.00000000072, 5.06852406179, 249.94765836750),
)

L1 = (
    (38.37687716731, 0.00000000000, 0.00000000000),
    (0.00016604187, 4.86319129565, 1.48447270830),
    (0.00015807148, 2.27923488532, 38.13303563780),
    (0.00003334701, 3.68199676020, 76.26607127560),
    (0.00001305840, 3.67320813491, 2.96894541660),
    (0.00000604832, 1.50477747549, 35.16409022120),
    (0.00000178623, 3.45318524147, 39.61750834610),
    (0.00000106537, 2.45126138334, 4.45341812490),
    (0.00000105747, 2.75479326550, 33.67961751290),
    (0.00000072684, 5.48724732699, 36.64856292950),
    (0.00000057069, 5.21649804970, 0.52126486180),
    (0.00000057355, 1.85767603384, 114.39910691340),
    (0.00000035368, 4.51676827545, 74.78159856730),
    (0.00000032216, 5.90411489680, 77.75054398390),
    (0.00000029871, 3.67043294114, 388.46515523820),
    (0.00000028866, 5.16877529164, 9.56122755560),
    (0.00000028742, 5.16732589024, 2.44768055480),
    (0.00000025507, 5.24526281928, 168.05251279940),
    (0.00000024869, 4.73193067810, 182.27960680100),
    (0.00000020205, 5.78945415677, 1021.24889455140),
    (0.00000019022, 1.82981144269, 484.44438245600),
    (0.00000018661, 1.31606255521, 498.67147645760),
    (0.00000015063, 4.95003893760, 137.03302416240),
    (0.00000015094, 3.98705254940, 32.19514480460),
    (0.00000010720, 2.44148149225, 4.19278569400),
    (0.00000011725, 4.89255650674, 71.81265315070),
    (0.00000009581, 1.23188039594, 5.93789083320),
    (0.00000009606, 1.88534821556, 41.10198105440),
    (0.00000008968, 0.01758559103, 8.07675484730),
    (0.00000009882, 6.08165628679, 7.11354700080),
    (0.00000007632, 5.51307048241, 73.29712585900),
    (0.00000006992, 0.61688864282, 2.92076130680),
    (0.00000005543, 2.24141557794, 46.20979048510),
    (0.00000004845, 3.71055823750, 112.91463420510),
    (0.00000003700, 5.25713252333, 111.43016149680),
    (0.00000003233, 6.10303038418, 70.32818044240),
    (0.00000002939, 4.86520586648, 98.89998852460),
    (0.00000002403, 2.90637675099, 601.76425067620),
    (0.00000002398, 1.04343654629, 6.59228213900),
    (0.00000002784, 4.95821114677, 108.46121608020),
    (0.00000002894, 4.20148844767, 381.35160823740),
    (0.00000002111, 5.93089610785, 25.60286266560),
    (0.00000002075, 5.20632201951, 30.71067209630),
    (0.00000002126, 0.54976393136, 41.05379694460),
    (0.00000002235, 2.38045158073, 453.42489381900),
    (0.00000001859, 0.89409373259, 24.11838995730),
    (0.00000002018, 3.42245274178, 31.01948863700),
    (0.00000001700, 3.91715254287, 11.04570026390),
    (0.00000001776, 3.86571077241, 395.57870223900),
    (0.00000001644, 0.15855999051, 152.53214255120),
    (0.00000001646, 3.34591387314, 44.72531777680),
    (0.00000001876, 2.59784179105, 33.94024994380),
    (0.00000001614, 0.42137145545, 175.16605980020),
    (0.00000001468, 6.12983933526, 1550.93985964600),
    (0.00000001408, 6.13722948564, 490.07345674850),
    (0.00000001207, 0.59525736062, 312.19908396260),
    (0.00000001336, 3.28611928206, 493.04240216510),
    (0.00000001176, 5.87266726996, 5.41662597140),
    (0.00000001517, 3.12967210501, 491.55792945680),
    (0.00000001053, 4.60375516830, 79.23501669220),
    (0.00000001037, 4.89007314395, 1.27202438720),
    (0.00000001034, 5.93741289103, 32.71640966640),
    (0.00000001038, 1.13470380744, 1014.13534755060),
    (0.00000001002, 1.85850922283, 5.10780943070),
    (0.00000000983, 0.05345050384, 7.42236354150),
    (0.00000000998, 1.73689827444, 1028.36244155220),
    (0.00000001193, 4.63176675581, 60.76695288680),
    (0.00000000940, 3.09103721222, 62.25142559510),
    (0.00000000994, 4.11489180313, 4.66586644600),
    (0.00000000890, 0.87049255398, 31.23193695810),
    (0.00000000852, 5.35508394316, 144.14657116320),
    (0.00000000922, 5.12373360511, 145.10977900970),
    (0.00000000789, 0.37496785039, 26.82670294300),
    (0.00000000828, 4.06035194600, 115.88357962170),
    (0.00000000711, 3.14189997439, 278.25883401880),
    (0.00000000727, 1.39718382835, 213.29909543800),
    (0.00000000781, 0.10946327923, 173.68158709190),
    (0.00000000793, 6.13086312116, 567.82400073240),
    (0.00000000669, 4.50554989443, 27.08733537390),
    (0.00000000825, 1.35568908148, 129.91947716160),
    (0.00000000738, 3.56766018960, 176.65053250850),
    (0.00000000714, 6.24797992301, 106.97674337190),
    (0.00000000654, 1.13177751192, 68.84370773410),
    (0.00000000624, 0.01567750666, 28.57180808220),
    (0.00000000608, 4.60180625368, 189.39315380180),
    (0.00000000595, 0.00857468445, 42.58645376270),
    (0.00000000530, 5.61201247153, 12.53017297220),
    (0.00000000521, 1.02371768017, 415.29185818120),
    (0.00000000639, 0.68930265745, 529.69096509460),
    (0.00000000526, 3.02138731705, 5.62907429250),
    (0.00000000456, 4.44331571392, 43.24084506850),
    (0.00000000524, 3.43316448349, 38.65430049960),
    (0.00000000436, 2.41630174435, 82.85835341460),
    (0.00000000424, 1.95736011325, 477.33083545520),
    (0.00000000443, 3.39350946329, 357.44566660120),
    (0.00000000383, 1.90232196422, 22.63391724900),
    (0.00000000479, 5.55141744216, 37.61177077600),
    (0.00000000462, 3.80436154644, 343.21857259960),
    (0.00000000384, 5.60377408953, 594.65070367540),
    (0.00000000369, 4.45577410338, 6.90109867970),
    (0.00000000358, 3.69126616347, 3.93215326310),
    (0.00000000352, 3.10952926034, 135.54855145410),
    (0.00000000368, 3.53577440355, 40.58071619260),
    (0.00000000424, 5.27159202779, 181.75834193920),
    (0.00000000361, 0.29018303419, 72.07328558160),
    (0.00000000390, 5.49512204296, 350.33211960040),
    (0.00000000378, 2.74122401337, 488.37653571910),
    (0.00000000372, 0.39980033572, 494.73932319450),
    (0.00000000353, 1.10614174053, 20.60692781950),
    (0.00000000296, 0.86351261285, 149.56319713460),
    (0.00000000307, 5.39420288683, 160.93896579860),
    (0.00000000395, 1.93577214824, 10137.01947493540),
    (0.00000000288, 2.28755739359, 47.69426319340),
    (0.00000000295, 2.48737537240, 19.12245511120),
    (0.00000000290, 0.18636083306, 143.62530630140),
    (0.00000000266, 3.09977370364, 69.36497259590),
    (0.00000000266, 1.21002824826, 505.78502345840),
    (0.00000000252, 3.12745026026, 460.53844081980),
    (0.00000000328, 0.50849285663, 6206.80977871580),
    (0.00000000257, 3.64119914774, 446.31134681820),
    (0.00000000239, 5.54080102299, 911.04257333200),
    (0.00000000265, 0.62702473701, 253.57099508990),
    (0.00000000287, 2.44403568436, 16.67477455640),
    (0.00000000231, 2.47026250085, 454.90936652730),
    (0.00000000230, 3.24571542922, 1066.49547719000),
    (0.00000000282, 1.48595620175, 983.11585891360),
    (0.00000000212, 5.41931177641, 64.95973858080),
    (0.00000000213, 1.64175339637, 1089.12939443900),
    (0.00000000238, 2.69801319489, 882.94384600180),
    (0.00000000210, 4.53976756699, 1093.32218013300),
    (0.00000000220, 2.30038816175, 1052.26838318840),
    (0.00000000256, 0.42073598460, 23.90594163620),
    (0.00000000216, 5.44225918870, 39.09624348430),
    (0.00000000201, 2.58746514605, 119.50691634410),
    (0.00000000224, 4.43751392203, 639.89728631400),
    (0.00000000186, 2.50651218075, 487.36514376280),
    (0.00000000189, 4.05785534221, 120.99138905240),
    (0.00000000184, 2.24245977278, 815.06334611420),
    (0.00000000202, 3.43517732411, 45.24658263860),
    (0.00000000175, 4.49165234532, 171.23390653710),
    (0.00000000171, 5.50633466316, 179.09821306330),
    (0.00000000200, 6.12663205401, 14.22709400160),
    (0.00000000173, 2.61090344107, 389.94962794650),
    (0.00000000167, 3.94754384833, 77.22927912210),
    (0.00000000166, 3.41009128748, 81.37388070630),
    (0.00000000163, 3.88198848446, 556.51766803760),
    (0.00000000164, 1.49614763046, 63.73589830340),
    (0.00000000176, 3.86129425367, 148.33935685720),
    (0.00000000161, 2.22215642318, 574.93754773320),
    (0.00000000171, 0.66899426684, 179.31066138440),
    (0.00000000161, 1.21480182441, 1024.43028828910),
    (0.00000000155, 3.25842414799, 10251.41858184880),
    (0.00000000183, 5.45168150656, 218.40690486870),
    (0.00000000152, 3.35145509017, 285.37238101960),
    (0.00000000152, 0.42398786475, 274.06604832480),
    (0.00000000146, 5.70714579127, 419.48464387520),
    (0.00000000156, 0.64321524870, 1029.84691426050),
    (0.00000000147, 4.30958930740, 157.63995198190),
    (0.00000000147, 1.80689177510, 377.41945497430),
    (0.00000000140, 1.49826604627, 386.98068252990),
    (0.00000000137, 2.14480243915, 563.63121503840),
    (0.00000000127, 3.98726599710, 84.34282612290),
    (0.00000000134, 4.16039455079, 169.53698550770),
    (0.00000000121, 0.29300927469, 206.18554843720),
    (0.00000000129, 2.67625057010, 180.79513409270),
    (0.00000000134, 3.18868986487, 166.56804009110),
    (0.00000000135, 5.07517561780, 426.59819087600),
    (0.00000000136, 1.81672451740, 151.04766984290),
    (0.00000000129, 3.64795525602, 183.76407950930),
    (0.00000000116, 6.06435563172, 220.41264243880),
    (0.00000000123, 4.46641157829, 1022.73336725970),
    (0.00000000112, 4.34485256988, 138.51749687070),
    (0.00000000116, 5.58946529961, 35.68535508300),
    (0.00000000108, 1.03796693383, 488.58898404020),
    (0.00000000108, 2.10378485880, 494.52687487340),
    (0.00000000106, 0.87068583107, 1059.38193018920),
    (0.00000000097, 0.74486741478, 485.92885516430),
    (0.00000000095, 5.54259914856, 497.18700374930),
    (0.00000000085, 3.16062141266, 522.57741809380),
    (0.00000000097, 6.05634803604, 482.95990974770),
    (0.00000000095, 0.23111852730, 500.15594916590),
    (0.00000000084, 2.64687252518, 536.80451209540),
    (0.00000000074, 3.90678924318, 1019.76442184310),
)

L2 = (
    (0.00053892649, 0.00000000000, 0.00000000000),
    (0.00000281251, 1.19084538887, 38.13303563780),
    (0.00000295693, 1.85520292248, 1.48447270830),
    (0.00000270190, 5.72143228148, 76.26607127560),
    (0.00000023023, 1.21035596452, 2.96894541660),
    (0.00000007333, 0.54033306830, 2.44768055480),
    (0.00000009057, 4.42544992035, 35.16409022120),
    (0.00000005223, 0.67427930044, 168.05251279940),
    (0.00000005201, 3.02338671812, 182.27960680100),
    (0.00000004288, 3.84351844003, 114.39910691340),
    (0.00000003925, 3.53214557374, 484.44438245600),
    (0.00000003741, 5.90238217874, 498.67147645760),
    (0.00000002966, 0.31002477611, 4.45341812490),
    (0.00000003415, 0.55971639038, 74.78159856730),
    (0.00000003255, 1.84921884906, 175.16605980020),
    (0.00000002157, 1.89135758747, 388.46515523820),
    (0.00000002211, 4.37997092240, 7.11354700080),
    (0.00000001847, 3.48574435762, 9.56122755560),
    (0.00000002451, 4.68586840176, 491.55792945680),
    (0.00000001844, 5.12281562096, 33.67961751290),
    (0.00000002204, 1.69321574906, 77.75054398390),
    (0.00000001652, 2.55859494053, 36.64856292950),
    (0.00000001309, 4.52400192922, 1021.24889455140),
    (0.00000001124, 0.38710602242, 137.03302416240),
    (0.00000000664, 0.88101734307, 4.19278569400),
    (0.00000000497, 2.24615784762, 395.57870223900),
    (0.00000000512, 6.22609200672, 381.35160823740),
    (0.00000000582, 5.25716719826, 31.01948863700),
    (0.00000000446, 0.36647221351, 98.89998852460),
    (0.00000000383, 5.48585528762, 5.93789083320),
    (0.00000000375, 4.61250246774, 8.07675484730),
    (0.00000000354, 1.30783918287, 601.76425067620),
    (0.00000000259, 5.66033623678, 112.91463420510),
    (0.00000000247, 2.89695614593, 189.39315380180),
    (0.00000000245, 4.26572913391, 220.41264243880),
    (0.00000000200, 0.52604535784, 64.95973858080),
    (0.00000000191, 4.88786653062, 39.61750834610),
    (0.00000000233, 3.16423779113, 41.10198105440),
    (0.00000000248, 5.85877831382, 1059.38193018920),
    (0.00000000194, 2.37949641473, 73.29712585900),
    (0.00000000227, 0.20028518978, 60.76695288680),
    (0.00000000184, 3.01962045713, 1014.13534755060),
    (0.00000000190, 5.57500985081, 343.21857259960),
    (0.00000000172, 3.66036463613, 477.33083545520),
    (0.00000000172, 0.59550457102, 46.20979048510),
    (0.00000000182, 1.92429384025, 183.76407950930),
    (0.00000000171, 1.61368476689, 357.44566660120),
    (0.00000000173, 6.23717119485, 493.04240216510),
    (0.00000000217, 1.46218158211, 71.81265315070),
    (0.00000000178, 0.34928799031, 1028.36244155220),
    (0.00000000169, 4.91086673212, 166.56804009110),
    (0.00000000157, 5.89200571154, 169.53698550770),
    (0.00000000182, 2.33457064554, 152.53214255120),
    (0.00000000151, 3.81621340568, 146.59425171800),
    (0.00000000136, 2.75150881988, 144.14657116320),
    (0.00000000104, 6.03262825314, 529.69096509460),
    (0.00000000076, 0.20932812381, 453.42489381900),
)

L3 = (
    (0.00000031254, 0.00000000000, 0.00000000000),
    (0.00000012461, 6.04431418812, 1.48447270830),
    (0.00000014541, 1.35337075856, 76.26607127560),
    (0.00000011547, 6.11257808366, 38.13303563780),
    (0.00000001351, 4.93951495175, 2.96894541660),
    (0.00000000741, 2.35936954597, 168.05251279940),
    (0.00000000715, 1.27409542804, 182.27960680100),
    (0.00000000537, 5.23632185196, 484.44438245600),
    (0.00000000523, 4.16769839601, 498.67147645760),
    (0.00000000664, 0.55871435877, 31.01948863700),
    (0.00000000301, 2.69253200796, 7.11354700080),
    (0.00000000194, 2.05904114139, 137.03302416240),
    (0.00000000206, 2.51012178002, 74.78159856730),
    (0.00000000160, 5.63111039032, 114.39910691340),
    (0.00000000149, 3.09327713923, 35.16409022120),
)

L4 = (
    (0.00000113998, 3.14159265359, 0.00000000000),
    (0.00000000605, 3.18211885677, 76.26607127560),
)

L5 = (
    (0.00000000874, 3.14159265359, 0.00000000000),
)

B0 = (
    (0.03088622933, 1.44104372626, 38.13303563780),
    (0.00027780087, 5.91271882843, 76.26607127560),
    (0.00027623609, 0.00000000000, 0.00000000000),
    (0.00015355490, 2.52123799481, 36.64856292950),
    (0.00015448133, 3.50877080888, 39.61750834610),
    (0.00001999919, 1.50998669505, 74.78159856730),
    (0.00001967540, 4.37778195768, 1.48447270830),
    (0.00001015137, 3.21561035875, 35.16409022120),
    (0.00000605767, 2.80246601405, 73.29712585900),
    (0.00000594878, 2.12892708114, 41.10198105440),
    (0.00000588805, 3.18655882497, 2.96894541660),
    (0.00000401830, 4.16883287237, 114.39910691340),
    (0.00000254333, 3.27120499438, 453.42489381900),
    (0.00000261647, 3.76722704749, 213.29909543800),
    (0.00000279964, 1.68165309699, 77.75054398390),
    (0.00000205590, 4.25652348864, 529.69096509460),
    (0.00000140455, 3.52969556376, 137.03302416240),
    (0.00000098530, 4.16774829927, 33.67961751290),
    (0.00000051257, 1.95121181203, 4.45341812490),
    (0.00000067971, 4.66970781659, 71.81265315070),
    (0.00000041931, 5.41783694467, 111.43016149680),
    (0.00000041822, 5.94832001477, 112.91463420510),
    (0.00000030637, 0.93620571932, 42.58645376270),
    (0.00000011084, 5.88898793049, 108.46121608020),
    (0.00000009620, 0.03944255108, 70.32818044240),
    (0.00000009664, 0.22455797403, 79.23501669220),
    (0.00000009728, 5.30069593532, 32.19514480460),
    (0.00000007386, 3.00684933642, 426.59819087600),
    (0.00000007087, 0.12535040656, 109.94568878850),
    (0.00000006021, 6.20514068152, 115.88357962170),
    (0.00000006169, 3.62098109648, 983.11585891360),
    (0.00000004777, 0.75210194972, 5.93789083320),
    (0.00000006391, 5.84646101060, 148.07872442630),
    (0.00000006251, 2.41678769385, 152.53214255120),
    (0.00000004539, 5.58182098700, 175.16605980020),
    (0.00000005006, 4.60815664851, 1059.38193018920),
    (0.00000004289, 4.19647392821, 47.69426319340),
    (0.00000005795, 5.07516716087, 415.29185818120),
    (0.00000004749, 2.51605725604, 37.61177077600),
    (0.00000004119, 1.72779509865, 28.57180808220),
    (0.00000004076, 6.00252170354, 145.10977900970),
    (0.00000004429, 5.65995321659, 98.89998852460),
    (0.00000003950, 2.74104636753, 350.33211960040),
    (0.00000004091, 1.61787956945, 39.09624348430),
    (0.00000004131, 4.40682554313, 37.16982779130),
    (0.00000004710, 3.50929350767, 38.65430049960),
    (0.00000004440, 4.78977105547, 38.08485152800),
    (0.00000004433, 1.23386935925, 38.18121974760),
    (0.00000003762, 4.83940791709, 491.55792945680),
    (0.00000002606, 1.20956732792, 451.94042111070),
    (0.00000002537, 2.18628045751, 454.90936652730),
    (0.00000002328, 5.19779918719, 72.07328558160),
    (0.00000002502, 0.85987904350, 106.97674337190),
    (0.00000002342, 0.81387240947, 4.19278569400),
    (0.00000001981, 0.46617960831, 184.72728735580),
    (0.00000001963, 6.01909114576, 44.07092647100),
    (0.00000002180, 0.70099749844, 206.18554843720),
    (0.00000001811, 0.40456996647, 40.58071619260),
    (0.00000001814, 3.64699555185, 220.41264243880),
    (0.00000001705, 6.13551142362, 181.75834193920),
    (0.00000001855, 5.61635630213, 35.68535508300),
    (0.00000001595, 2.97147156093, 37.87240320690),
    (0.00000001785, 2.42154818096, 388.46515523820),
    (0.00000001595, 3.05266110075, 38.39366806870),
    (0.00000001437, 1.48678704605, 135.54855145410),
    (0.00000001387, 2.46149266117, 138.51749687070),
    (0.00000001366, 1.52026779665, 68.84370773410),
    (0.00000001575, 3.58964541604, 38.02116105320),
    (0.00000001297, 5.06156596196, 33.94024994380),
    (0.00000001487, 0.20211121607, 30.05628079050),
    (0.00000001504, 5.80298577327, 46.20979048510),
    (0.00000001192, 0.87275514483, 42.32582133180),
    (0.00000001569, 2.43405967107, 38.24491022240),
    (0.00000001207, 1.84658687853, 251.43213107580),
    (0.00000001015, 0.53439848924, 129.91947716160),
    (0.00000000999, 2.47463873948, 312.19908396260),
    (0.00000000990, 3.41514319052, 144.14657116320),
    (0.00000000963, 4.31733242907, 151.04766984290),
    (0.00000001020, 0.98226686775, 143.62530630140),
    (0.00000000941, 1.02993053785, 221.37585028530),
    (0.00000000938, 2.43648356625, 567.82400073240),
    (0.00000001111, 0.65175024456, 146.59425171800),
    (0.00000000777, 0.00175975222, 218.40690486870),
    (0.00000000895, 0.25123869620, 30.71067209630),
    (0.00000000795, 5.80519741659, 149.56319713460),
    (0.00000000737, 3.40060492866, 446.31134681820),
    (0.00000000719, 1.43795191278, 8.07675484730),
    (0.00000000720, 0.00651007550, 460.53844081980),
    (0.00000000766, 4.03399506246, 522.57741809380),
    (0.00000000666, 1.39457824982, 84.34282612290),
    (0.00000000584, 1.01405548136, 536.80451209540),
    (0.00000000596, 0.62390100715, 35.21227433100),
    (0.00000000598, 5.39946724188, 41.05379694460),
    (0.00000000475, 5.80072248338, 7.42236354150),
    (0.00000000510, 1.34478579740, 258.02441321480),
    (0.00000000458, 5.25325523118, 80.71948940050),
    (0.00000000421, 3.24496387889, 416.77633088950),
    (0.00000000446, 1.19167306357, 180.27386923090),
    (0.00000000471, 0.92632922375, 44.72531777680),
    (0.00000000387, 1.68488418788, 183.24281464750),
    (0.00000000375, 0.15223869165, 255.05546779820),
    (0.00000000354, 4.21526988674, 0.96320784650),
    (0.00000000379, 2.16947487177, 105.49227066360),
    (0.00000000341, 4.79194051680, 110.20632121940),
    (0.00000000427, 5.15774894584, 31.54075349880),
    (0.00000000302, 3.45706306280, 100.38446123290),
    (0.00000000298, 2.26790695187, 639.89728631400),
    (0.00000000279, 0.25689162963, 39.50563376150),
    (0.00000000320, 3.58085653166, 45.24658263860),
    (0.00000000269, 5.72024180826, 36.76043751410),
    (0.00000000247, 0.61040148804, 186.21176006410),
    (0.00000000245, 0.64173616273, 419.48464387520),
    (0.00000000235, 0.73189197665, 10213.28554621100),
    (0.00000000232, 0.37399822852, 490.07345674850),
    (0.00000000230, 5.76570492457, 12.53017297220),
    (0.00000000240, 4.13447692727, 0.52126486180),
    (0.00000000279, 1.62614865256, 294.67297614430),
    (0.00000000238, 2.18528916550, 219.89137757700),
    (0.00000000262, 3.08384135298, 6.59228213900),
    (0.00000000217, 2.93214905312, 27.08733537390),
    (0.00000000217, 4.69210602828, 406.10313764110),
    (0.00000000219, 1.35212712560, 216.92243216040),
    (0.00000000200, 2.35215465744, 605.95703637020),
    (0.00000000232, 3.92583619589, 1512.80682400820),
    (0.00000000223, 5.52392277606, 187.69623277240),
    (0.00000000190, 0.29169556516, 291.70403072770),
    (0.00000000236, 3.12464145036, 563.63121503840),
    (0.00000000193, 0.53675942386, 60.76695288680),
    (0.00000000215, 3.78391259001, 103.09277421860),
    (0.00000000172, 5.63262770743, 7.11354700080),
    (0.00000000164, 4.14700645532, 77.22927912210),
    (0.00000000162, 0.72021213236, 11.04570026390),
    (0.00000000160, 4.23490438166, 487.36514376280),
    (0.00000000191, 0.37651439206, 31.01948863700),
    (0.00000000157, 1.02419759383, 6283.07584999140),
    (0.00000000157, 4.42530429545, 6206.80977871580),
    (0.00000000178, 6.24797160202, 316.39186965660),
    (0.00000000161, 5.65988283675, 343.21857259960),
    (0.00000000153, 5.58405022784, 252.08652238160),
    (0.00000000189, 4.80791039970, 641.12112659140),
    (0.00000000166, 5.50438043692, 662.53120356300),
    (0.00000000146, 5.08949604858, 286.59622129700),
    (0.00000000145, 2.13015521881, 2042.49778910280),
    (0.00000000156, 2.19452173251, 274.06604832480),
    (0.00000000148, 4.85696640135, 442.75170057060),
    (0.00000000187, 4.96121139073, 1589.07289528380),
    (0.00000000155, 2.28260574227, 142.14083359310),
    (0.00000000134, 1.29277093566, 456.39383923560),
    (0.00000000126, 5.59769497652, 179.35884549420),
    (0.00000000146, 2.53359213478, 256.53994050650),
    (0.00000000140, 1.57962199954, 75.74480641380),
    (0.00000000123, 0.05442220184, 944.98282327580),
    (0.00000000122, 1.90676379802, 418.26080359780),
    (0.00000000154, 1.86865302773, 331.32153907380),
    (0.00000000144, 5.52229258454, 14.01464568050),
    (0.00000000138, 2.80728175526, 82.85835341460),
    (0.00000000107, 0.66995358132, 190.66517818900),
    (0.00000000114, 1.48894980280, 253.57099508990),
    (0.00000000110, 5.32587573069, 240.12579838100),
    (0.00000000105, 0.65548440578, 173.68158709190),
    (0.00000000102, 2.58735617801, 450.45594840240),
    (0.00000000098, 0.44044795266, 328.35259365720),
    (0.00000000101, 4.71267656829, 117.36805233000),
    (0.00000000094, 0.54938580474, 293.18850343600),
    (0.00000000095, 2.17636214523, 101.86893394120),
    (0.00000000093, 0.63687810471, 377.15882254340),
    (0.00000000091, 5.84828809934, 10137.01947493540),
    (0.00000000089, 1.02830167997, 1021.24889455140),
    (0.00000000094, 1.79320597168, 493.04240216510),
    (0.00000000080, 1.58140274465, 69.15252427480),
    (0.00000000075, 0.23453373368, 63.73589830340),
    (0.00000000071, 1.51961989690, 488.58898404020),
)

B1 = (
    (0.00227279214, 3.80793089870, 38.13303563780),
    (0.00001803120, 1.97576485377, 76.26607127560),
    (0.00001385733, 4.82555548018, 36.64856292950),
    (0.00001433300, 3.14159265359, 0.00000000000),
    (0.00001073298, 6.08054240712, 39.61750834610),
    (0.00000147903, 3.85766231348, 74.78159856730),
    (0.00000136448, 0.47764957338, 1.48447270830),
    (0.00000070285, 6.18782052139, 35.16409022120),
    (0.00000051899, 5.05221791891, 73.29712585900),
    (0.00000037273, 4.89476629246, 41.10198105440),
    (0.00000042568, 0.30721737205, 114.39910691340),
    (0.00000037104, 5.75999349109, 2.96894541660),
    (0.00000026399, 5.21566335936, 213.29909543800),
    (0.00000016949, 4.26463671859, 77.75054398390),
    (0.00000018747, 0.90426522185, 453.42489381900),
    (0.00000012951, 6.17709713139, 529.69096509460),
    (0.00000010502, 1.20336443465, 137.03302416240),
    (0.00000004416, 1.25478204684, 111.43016149680),
    (0.00000004383, 6.14147099615, 71.81265315070),
    (0.00000003694, 0.94837702528, 33.67961751290),
    (0.00000002957, 4.77532871210, 4.45341812490),
    (0.00000002698, 1.92435531119, 112.91463420510),
    (0.00000001989, 3.96637567224, 42.58645376270),
    (0.00000001150, 4.30568700024, 37.61177077600),
    (0.00000000871, 4.81775882249, 152.53214255120),
    (0.00000000944, 2.21777772050, 109.94568878850),
    (0.00000000936, 1.17054983940, 148.07872442630),
    (0.00000000925, 2.40329074000, 206.18554843720),
    (0.00000000690, 1.57381082857, 38.65430049960),
    (0.00000000624, 2.79466003645, 79.23501669220),
    (0.00000000726, 4.13829519132, 28.57180808220),
    (0.00000000640, 2.46161252327, 115.88357962170),
    (0.00000000531, 2.96991530500, 98.89998852460),
    (0.00000000537, 1.95986772922, 220.41264243880),
    (0.00000000539, 2.06690307827, 40.58071619260),
    (0.00000000716, 0.55781847010, 350.33211960040),
    (0.00000000563, 1.84072805158, 983.11585891360),
    (0.00000000533, 1.34787677940, 47.69426319340),
    (0.00000000566, 1.80111775954, 175.16605980020),
    (0.00000000449, 1.62191691011, 144.14657116320),
    (0.00000000371, 2.74239666472, 415.29185818120),
    (0.00000000381, 6.11910193382, 426.59819087600),
    (0.00000000366, 2.39752585360, 129.91947716160),
    (0.00000000456, 3.19611413854, 108.46121608020),
    (0.00000000327, 3.62341506247, 38.18121974760),
    (0.00000000328, 0.89613145346, 38.08485152800),
    (0.00000000341, 3.87265469070, 35.68535508300),
    (0.00000000331, 4.48858774501, 460.53844081980),
    (0.00000000414, 1.03543720726, 70.32818044240),
    (0.00000000310, 0.51297445145, 37.16982779130),
    (0.00000000287, 2.18351651800, 491.55792945680),
    (0.00000000274, 6.11504724934, 522.57741809380),
    (0.00000000281, 3.81657117512, 5.93789083320),
    (0.00000000298, 4.00532631258, 39.09624348430),
    (0.00000000265, 5.26569823181, 446.31134681820),
    (0.00000000319, 1.34097217817, 184.72728735580),
    (0.00000000203, 6.02944475303, 149.56319713460),
    (0.00000000205, 5.53935732020, 536.80451209540),
    (0.00000000226, 6.17710997862, 454.90936652730),
    (0.00000000186, 3.24302117645, 4.19278569400),
    (0.00000000179, 4.91458426239, 451.94042111070),
    (0.00000000198, 2.30775852880, 146.59425171800),
    (0.00000000166, 1.16793600058, 72.07328558160),
    (0.00000000147, 2.10574339673, 44.07092647100),
    (0.00000000123, 1.98250467171, 46.20979048510),
    (0.00000000159, 3.46955908364, 145.10977900970),
    (0.00000000116, 5.88971113590, 38.02116105320),
    (0.00000000115, 4.73412534395, 38.24491022240),
    (0.00000000125, 3.42713474801, 251.43213107580),
    (0.00000000128, 1.51108932026, 221.37585028530),
    (0.00000000127, 0.17176461812, 138.51749687070),
    (0.00000000124, 5.85160407534, 1059.38193018920),
    (0.00000000091, 2.38273591235, 30.05628079050),
    (0.00000000118, 5.27114846878, 37.87240320690),
    (0.00000000117, 5.35267669439, 38.39366806870),
    (0.00000000099, 5.19920708255, 135.54855145410),
    (0.00000000114, 4.37452353441, 388.46515523820),
    (0.00000000093, 4.64183693718, 106.97674337190),
    (0.00000000084, 1.35269684746, 33.94024994380),
    (0.00000000111, 3.56226463770, 181.75834193920),
    (0.00000000082, 3.18401661435, 42.32582133180),
    (0.00000000084, 5.51669920239, 8.07675484730),
)

B2 = (
    (0.00009690766, 5.57123750291, 38.13303563780),
    (0.00000078815, 3.62705474219, 76.26607127560),
    (0.00000071523, 0.45476688580, 36.64856292950),
    (0.00000058646, 3.14159265359, 0.00000000000),
    (0.00000029915, 1.60671721861, 39.61750834610),
    (0.00000006472, 5.60736756575, 74.78159856730),
    (0.00000005800, 2.25341847151, 1.48447270830),
    (0.00000004309, 1.68126737666, 35.16409022120),
    (0.00000003502, 2.39142672984, 114.39910691340),
    (0.00000002649, 0.65061457644, 73.29712585900),
    (0.00000001518, 0.37600329684, 213.29909543800),
    (0.00000001223, 1.23116043030, 2.96894541660),
    (0.00000000766, 5.45279753249, 453.42489381900),
    (0.00000000779, 2.07081431472, 529.69096509460),
    (0.00000000496, 0.26552533921, 41.10198105440),
    (0.00000000469, 5.87866293959, 77.75054398390),
    (0.00000000482, 5.63056237954, 137.03302416240),
    (0.00000000345, 1.80085651594, 71.81265315070),
    (0.00000000274, 2.86650141006, 33.67961751290),
    (0.00000000158, 4.63868656467, 206.18554843720),
    (0.00000000166, 1.24877330835, 220.41264243880),
    (0.00000000153, 2.87376446497, 111.43016149680),
    (0.00000000116, 3.63838544843, 112.91463420510),
    (0.00000000085, 0.43712705655, 4.45341812490),
    (0.00000000104, 6.12597614674, 144.14657116320),
)

B3 = (
    (0.00000273423, 1.01688979072, 38.13303563780),
    (0.00000002274, 2.36805657126, 36.64856292950),
    (0.00000002029, 5.33364321342, 76.26607127560),
    (0.00000002393, 0.00000000000, 0.00000000000),
    (0.00000000538, 3.21934211365, 39.61750834610),
    (0.00000000242, 4.52650721578, 114.39910691340),
    (0.00000000185, 1.04913770083, 74.78159856730),
    (0.00000000155, 3.62376309338, 35.16409022120),
    (0.00000000157, 3.94195369610, 1.48447270830),
)

B4 = (
    (0.00000005728, 2.66872693322, 38.13303563780),
)

B5 = (
    (0.00000000113, 4.70646877989, 38.13303563780),
)

R0 = (
    (30.07013206102, 0.00000000000, 0.00000000000),
    (0.27062259490, 1.32999458930, 38.13303563780),
    (0.01691764281, 3.25186138896, 36.64856292950),
    (0.00807830737, 5.18592836167, 1.48447270830),
    (0.00537760613, 4.52113902845, 35.16409022120),
    (0.00495725642, 1.57105654815, 491.55792945680),
    (0.00274571970, 1.84552256801, 175.16605980020),
    (0.00135134095, 3.37220607384, 39.61750834610),
    (0.00121801825, 5.79754444303, 76.26607127560),
    (0.00100895397, 0.37702748681, 73.29712585900),
    (0.00069791722, 3.79617226928, 2.96894541660),
    (0.00046687838, 5.74937810094, 33.67961751290),
    (0.00024593778, 0.50801728204, 109.94568878850),
    (0.00016939242, 1.59422166991, 71.81265315070),
    (0.00014229686, 1.07786112902, 74.78159856730),
    (0.00012011825, 1.92062131635, 1021.24889455140),
    (0.00008394731, 0.67816895547, 146.59425171800),
    (0.00007571800, 1.07149263431, 388.46515523820),
    (0.00005720852, 2.59059512267, 4.45341812490),
    (0.00004839672, 1.90685991070, 41.10198105440),
    (0.00004483492, 2.90573457534, 529.69096509460),
    (0.00004270202, 3.41343865825, 453.42489381900),
    (0.00004353790, 0.67985662370, 32.19514480460),
    (0.00004420804, 1.74993796503, 108.46121608020),
    (0.00002881063, 1.98600105123, 137.03302416240),
    (0.00002635535, 3.09755943422, 213.29909543800),
    (0.00003380930, 0.84810683275, 183.24281464750),
    (0.00002878942, 3.67415901855, 350.33211960040),
    (0.00002306293, 2.80962935724, 70.32818044240),
    (0.00002530149, 5.79839567009, 490.07345674850),
    (0.00002523132, 0.48630800015, 493.04240216510),
    (0.00002087303, 0.61858378281, 33.94024994380),
    (0.00001976522, 5.11703044560, 168.05251279940),
    (0.00001905254, 1.72186472126, 182.27960680100),
    (0.00001654039, 1.92782545887, 145.10977900970),
    (0.00001435072, 1.70005157785, 484.44438245600),
    (0.00001403029, 4.58914203187, 498.67147645760),
    (0.00001499193, 1.01623299513, 219.89137757700),
    (0.00001398860, 0.76220317620, 176.65053250850),
    (0.00001403377, 6.07659416908, 173.68158709190),
    (0.00001128560, 5.96661179805, 9.56122755560),
    (0.00001228304, 1.59881465324, 77.75054398390),
    (0.00000835414, 3.97066884218, 114.39910691340),
    (0.00000811186, 3.00258880870, 46.20979048510),
    (0.00000731925, 2.10447054189, 181.75834193920),
    (0.00000615781, 2.97874625677, 106.97674337190),
    (0.00000704778, 1.18738210880, 256.53994050650),
    (0.00000502040, 1.38657803368, 5.93789083320),
    (0.00000530357, 4.24059166485, 111.43016149680),
    (0.00000437096, 2.27029212923, 1550.93985964600),
    (0.00000400250, 1.25609325435, 8.07675484730),
    (0.00000421011, 1.89084929506, 30.71067209630),
    (0.00000382457, 3.29965259685, 983.11585891360),
    (0.00000422485, 5.53186169605, 525.49817940060),
    (0.00000355389, 2.27847846648, 218.40690486870),
    (0.00000280062, 1.54129714238, 98.89998852460),
    (0.00000314499, 3.95932948594, 381.35160823740),
    (0.00000280556, 4.54238271682, 44.72531777680),
    (0.00000267738, 5.13323364247, 112.91463420510),
    (0.00000333311, 5.75067616021, 39.09624348430),
    (0.00000291625, 4.02398326341, 68.84370773410),
    (0.00000321429, 1.50625025822, 454.90936652730),
    (0.00000309196, 2.85452752153, 72.07328558160),
    (0.00000345094, 1.35905860594, 293.18850343600),
    (0.00000307439, 0.31964571332, 601.76425067620),
    (0.00000251356, 3.53992782846, 312.19908396260),
    (0.00000248152, 3.41078346726, 37.61177077600),
    (0.00000306000, 2.72475094464, 6244.94281435360),
    (0.00000293532, 4.89079857814, 528.20649238630),
    (0.00000234479, 0.59231043427, 42.58645376270),
    (0.00000239628, 3.16441455173, 143.62530630140),
    (0.00000214523, 3.62480283040, 278.25883401880),
    (0.00000246198, 1.01506302015, 141.22580985640),
    (0.00000174089, 5.55011789988, 567.82400073240),
    (0.00000163934, 2.10166491786, 2.44768055480),
    (0.00000162897, 2.48946521653, 4.19278569400),
    (0.00000193455, 1.58425287580, 138.51749687070),
    (0.00000155323, 3.28425127954, 31.01948863700),
    (0.00000182469, 2.45244890571, 255.05546779820),
    (0.00000177846, 4.14773474853, 10175.15251057320),
    (0.00000174413, 1.53042999914, 329.83706636550),
    (0.00000137649, 3.34900537767, 0.96320784650),
    (0.00000161011, 5.16655038482, 211.81462272970),
    (0.00000113473, 4.96286007991, 148.07872442630),
    (0.00000128823, 3.25521535448, 24.11838995730),
    (0.00000107363, 3.26457701792, 1059.38193018920),
    (0.00000122732, 5.39399536941, 62.25142559510),
    (0.00000120529, 3.08050145518, 184.72728735580),
    (0.00000099356, 1.92888554099, 28.57180808220),
    (0.00000097713, 2.59474415429, 6.59228213900),
    (0.00000124095, 3.11516750340, 221.37585028530),
    (0.00000124693, 2.97042405451, 251.43213107580),
    (0.00000114252, 0.25039919123, 594.65070367540),
    (0.00000111006, 3.34276426767, 180.27386923090),
    (0.00000120939, 1.92914010593, 25.60286266560),
    (0.00000104667, 0.94883561775, 395.57870223900),
    (0.00000109779, 5.43147520571, 494.52687487340),
    (0.00000096919, 0.86184760695, 1014.13534755060),
    (0.00000098685, 0.89577952710, 488.58898404020),
    (0.00000088968, 4.78109764779, 144.14657116320),
    (0.00000107888, 0.98700578434, 1124.34166877000),
    (0.00000097067, 2.62667400276, 291.70403072770),
    (0.00000075131, 5.88936524779, 43.24084506850),
    (0.00000093718, 6.09873565184, 526.72201967800),
    (0.00000094822, 0.20662943940, 456.39383923560),
    (0.00000070036, 2.39683345663, 426.59819087600),
    (0.00000077187, 4.21076753240, 105.49227066360),
    (0.00000089874, 3.25100749923, 258.02441321480),
    (0.00000069133, 4.93031154435, 1028.36244155220),
    (0.00000090657, 1.69466970587, 366.48562929500),
    (0.00000074242, 3.14479101276, 82.85835341460),
    (0.00000057995, 0.86159785905, 60.76695288680),
    (0.00000078695, 1.09307575550, 700.66423920080),
    (0.00000057230, 0.81331949225, 2.92076130680),
    (0.00000063443, 4.39590123005, 149.56319713460),
    (0.00000055698, 3.89047249911, 47.69426319340),
    (0.00000056430, 5.15003563302, 0.52126486180),
    (0.00000056174, 5.42986960794, 911.04257333200),
    (0.00000061746, 6.16453667559, 1019.76442184310),
    (0.00000070503, 0.08077330612, 40.58071619260),
    (0.00000074677, 4.85904499980, 186.21176006410),
    (0.00000061861, 4.78702599861, 11.04570026390),
    (0.00000061135, 0.83712253227, 1022.73336725970),
    (0.00000061268, 5.70228826765, 178.13500521680),
    (0.00000052887, 0.37458943972, 27.08733537390),
    (0.00000056722, 3.52318112447, 216.92243216040),
    (0.00000048819, 5.10789123481, 64.95973858080),
    (0.00000063290, 4.39424910030, 807.94979911340),
    (0.00000064062, 6.28297531806, 7.11354700080),
    (0.00000046356, 1.34735469284, 451.94042111070),
    (0.00000060540, 3.40316162416, 294.67297614430),
    (0.00000046900, 0.17048203552, 7.42236354150),
    (0.00000056766, 0.45048868231, 140.00196957900),
    (0.00000055887, 1.06815733757, 172.19711438360),
    (0.00000053761, 2.79644687008, 328.35259365720),
    (0.00000043828, 6.04655696644, 135.54855145410),
    (0.00000049549, 0.64106656292, 41.05379694460),
    (0.00000053960, 2.91774494436, 563.63121503840),
    (0.00000042961, 5.40175361431, 487.36514376280),
    (0.00000051508, 0.09105540708, 210.33015002140),
    (0.00000041889, 3.12343223889, 29.22619938800),
    (0.00000047655, 3.90701760087, 63.73589830340),
    (0.00000041639, 6.26847783513, 32.71640966640),
    (0.00000041429, 4.45464156759, 37.16982779130),
    (0.00000040745, 0.16043648294, 79.23501669220),
    (0.00000048205, 1.84198373010, 403.13419222450),
    (0.00000036912, 0.44771386183, 30.05628079050),
    (0.00000047762, 0.88083849566, 3302.47939106200),
    (0.00000039465, 3.50565484069, 357.44566660120),
    (0.00000042139, 0.63375113663, 343.21857259960),
    (0.00000041275, 1.36370496322, 31.23193695810),
    (0.00000042612, 3.55270845713, 38.65430049960),
    (0.00000038931, 5.26691753270, 415.29185818120),
    (0.00000038967, 5.25866056502, 386.98068252990),
    (0.00000033734, 5.24400184426, 67.35923502580),
    (0.00000040879, 3.55292279438, 331.32153907380),
    (0.00000038768, 1.12288359393, 38.18121974760),
    (0.00000037500, 6.08687972441, 35.42472265210),
    (0.00000038831, 4.67876780698, 38.08485152800),
    (0.00000038231, 6.26491054328, 389.94962794650),
    (0.00000029976, 4.45759985804, 22.63391724900),
    (0.00000031356, 0.07746010366, 12.53017297220),
    (0.00000026341, 4.59559782754, 106.01353552540),
    (0.00000027465, 5.99541587890, 206.18554843720),
    (0.00000025152, 4.49867760320, 34.20088237470),
    (0.00000024122, 5.17089441917, 129.91947716160),
    (0.00000028997, 3.64927210210, 253.57099508990),
    (0.00000027173, 4.37944546475, 142.14083359310),
    (0.00000030634, 1.59348806560, 348.84764689210),
    (0.00000031464, 1.05065113524, 100.38446123290),
    (0.00000024056, 1.02801635413, 41.75637236020),
    (0.00000022632, 4.72511111292, 81.37388070630),
    (0.00000021942, 3.48416607882, 69.15252427480),
    (0.00000026333, 3.01556008632, 365.00115658670),
    (0.00000022355, 3.92220883921, 5.10780943070),
    (0.00000022498, 4.03487494425, 19.12245511120),
    (0.00000022885, 1.58977064672, 189.39315380180),
    (0.00000026520, 3.61427038042, 367.97010200330),
    (0.00000025496, 2.43810518614, 351.81659230870),
    (0.00000019111, 2.59694457001, 2080.63082474060),
    (0.00000019640, 6.15701741238, 35.21227433100),
    (0.00000025688, 2.00512719767, 439.78275515400),
    (0.00000021613, 3.32354204724, 119.50691634410),
    (0.00000025389, 4.74025836522, 1474.67378837040),
    (0.00000018107, 5.35129342595, 244.31858407500),
    (0.00000023295, 5.93767742799, 316.39186965660),
    (0.00000022087, 4.81594755148, 84.34282612290),
    (0.00000016972, 3.05105149940, 220.41264243880),
    (0.00000020022, 4.99276451168, 179.09821306330),
    (0.00000020370, 1.86508317889, 171.23390653710),
    (0.00000019426, 2.04829970231, 5.41662597140),
    (0.00000022628, 0.27205783433, 666.72398925700),
    (0.00000019072, 3.70882976684, 164.12035953630),
    (0.00000017969, 3.40425338171, 69.36497259590),
    (0.00000018716, 0.90215956591, 285.37238101960),
    (0.00000015889, 0.42011285882, 697.74347789400),
    (0.00000014988, 3.08544843665, 704.85702489480),
    (0.00000014774, 3.36129613309, 274.06604832480),
    (0.00000015972, 1.82864185268, 477.33083545520),
    (0.00000013892, 2.94161501165, 38.39366806870),
    (0.00000013922, 2.85574364078, 37.87240320690),
    (0.00000015481, 4.94982954853, 101.86893394120),
    (0.00000017571, 5.82317632469, 35.68535508300),
    (0.00000015856, 5.04973561582, 36.90919536040),
    (0.00000016414, 3.63049397028, 45.24658263860),
    (0.00000017158, 2.51251149482, 20.60692781950),
    (0.00000012941, 3.03041555329, 522.57741809380),
    (0.00000015752, 5.00292909214, 247.23934538180),
    (0.00000012679, 0.20331109568, 460.53844081980),
    (0.00000016260, 5.93480347217, 815.06334611420),
    (0.00000012903, 3.51141502996, 446.31134681820),
    (0.00000013891, 5.51064697670, 31.54075349880),
    (0.00000013668, 5.45576135320, 39.35687591520),
    (0.00000013418, 3.95805150079, 290.21955801940),
    (0.00000015368, 2.45783892707, 26.82670294300),
    (0.00000014246, 3.18588280921, 401.64971951620),
    (0.00000012222, 4.94370170146, 14.01464568050),
    (0.00000015484, 3.79703715637, 404.61866493280),
    (0.00000013427, 3.79527836573, 151.04766984290),
    (0.00000014450, 4.93940408761, 120.99138905240),
    (0.00000014331, 4.71117327722, 738.79727483860),
    (0.00000011566, 5.91003539239, 536.80451209540),
    (0.00000015578, 2.91836788254, 875.83029900100),
    (0.00000013124, 2.16056013419, 152.53214255120),
    (0.00000011744, 2.94770244071, 2.70831298570),
    (0.00000012793, 1.97868575679, 1.37259812370),
    (0.00000012969, 0.00535826017, 97.41551581630),
    (0.00000013891, 4.76435441820, 0.26063243090),
    (0.00000013729, 2.32306473850, 38.24491022240),
    (0.00000010714, 6.18129683877, 115.88357962170),
    (0.00000011610, 4.61712859898, 178.78939652260),
    (0.00000011257, 0.79300245838, 42.32582133180),
    (0.00000014500, 5.44690193314, 44.07092647100),
    (0.00000011534, 5.26580538005, 160.93896579860),
    (0.00000013355, 5.20849186729, 32.45577723550),
    (0.00000013658, 2.15687632802, 476.43131808350),
    (0.00000013782, 3.47865209163, 38.02116105320),
    (0.00000012714, 2.09462988855, 20.49505323490),
    (0.00000013257, 5.15138524813, 103.09277421860),
    (0.00000009715, 0.74597883480, 918.15612033280),
    (0.00000010340, 5.38977407079, 222.86032299360),
    (0.00000013357, 5.89635739027, 748.09786996330),
    (0.00000012632, 1.20306997433, 16.15350969460),
    (0.00000011437, 1.58444114292, 495.49008271990),
    (0.00000011424, 4.74142930795, 487.62577619370),
    (0.00000009098, 5.19932138822, 118.02244363580),
    (0.00000009336, 0.97313630925, 662.53120356300),
    (0.00000009827, 4.48170250645, 505.78502345840),
    (0.00000008585, 0.20375451897, 944.98282327580),
    (0.00000008875, 5.53111742265, 17.52610781830),
    (0.00000009957, 4.03258125243, 169.53698550770),
    (0.00000011506, 3.11649121817, 17.63798240290),
    (0.00000009818, 5.20376439002, 1.59634729290),
    (0.00000010160, 3.74441320429, 457.61767951300),
    (0.00000008661, 0.31247523804, 1440.73353842660),
    (0.00000008496, 1.06445636872, 55.77101804070),
    (0.00000011162, 1.92907800408, 564.85505531580),
    (0.00000008057, 0.31116345866, 377.41945497430),
    (0.00000009851, 4.23328578127, 418.26080359780),
    (0.00000007938, 2.40417397694, 488.37653571910),
    (0.00000009894, 0.63707319139, 183.76407950930),
    (0.00000009913, 3.94049519088, 441.26722786230),
    (0.00000007867, 3.87469522964, 494.73932319450),
    (0.00000007589, 3.15909316566, 416.77633088950),
    (0.00000008496, 5.38968698704, 104.00779795530),
    (0.00000009716, 3.06038536864, 166.56804009110),
    (0.00000009377, 0.56416645296, 673.31627139600),
    (0.00000008771, 5.24534141981, 1057.89745748090),
    (0.00000007990, 1.55726966638, 59.28248017850),
    (0.00000009090, 4.32953439022, 29.74746424980),
    (0.00000009667, 5.89033222679, 358.40887444770),
    (0.00000007209, 2.29464803358, 79.18683258240),
    (0.00000008062, 0.44458003524, 19.01058052660),
    (0.00000008254, 3.47304582051, 156.15547927360),
    (0.00000009804, 6.06393995615, 784.74643289280),
    (0.00000008516, 5.99060386955, 180.79513409270),
    (0.00000008090, 1.38588221442, 1654.03263386460),
    (0.00000009074, 4.03971490460, 1017.05610885740),
    (0.00000006908, 1.41919832926, 178.34745353790),
    (0.00000008230, 2.53750470473, 518.38463239980),
    (0.00000008594, 5.29104206063, 457.87831194390),
    (0.00000006769, 5.43380191356, 171.98466606250),
    (0.00000008571, 0.35876828441, 636.66770846650),
    (0.00000008995, 1.36992508507, 6209.77872413240),
    (0.00000006641, 2.92327140872, 0.04818410980),
    (0.00000009278, 3.80308677009, 25558.21217647960),
    (0.00000006567, 4.01934954352, 0.11187458460),
    (0.00000006441, 4.28250687347, 36.12729806770),
    (0.00000007257, 4.09776235307, 326.86812094890),
    (0.00000008384, 5.49363770202, 532.61172640140),
    (0.00000007471, 4.62144262894, 526.98265210890),
    (0.00000007500, 0.61545750834, 485.92885516430),
    (0.00000007716, 1.04880632264, 525.23754696970),
    (0.00000008504, 2.79350586429, 10139.98842035200),
    (0.00000007466, 5.07942174095, 157.63995198190),
    (0.00000007186, 6.22833818429, 77.22927912210),
    (0.00000007784, 1.89308880453, 984.60033162190),
    (0.00000006513, 0.07498932215, 79.88940799800),
    (0.00000006077, 2.96673519667, 36.69674703930),
    (0.00000007706, 5.70632580790, 209.10630974400),
    (0.00000007265, 4.94483532589, 131.40394986990),
    (0.00000006984, 2.53239305821, 497.18700374930),
    (0.00000007824, 2.31462643851, 513.07988101300),
    (0.00000007175, 3.69203633127, 524.01370669230),
    (0.00000006855, 0.14076801572, 283.62727588040),
    (0.00000006922, 3.36515011915, 438.29828244570),
    (0.00000007349, 3.50406958122, 500.15594916590),
    (0.00000006301, 0.14776691217, 608.87779767700),
    (0.00000005892, 4.24403528888, 4.66586644600),
    (0.00000007613, 5.14905171677, 259.50888592310),
    (0.00000007128, 5.92696788834, 482.95990974770),
    (0.00000006829, 1.01745137848, 1543.82631264520),
    (0.00000005981, 4.79954091087, 215.43795945210),
    (0.00000005526, 2.34003154732, 65.22037101170),
    (0.00000006817, 6.12162829690, 395.05743737720),
    (0.00000005369, 3.76855960849, 52099.54021187280),
    (0.00000005776, 5.61434462641, 987.56927703850),
    (0.00000007523, 5.60432148128, 2810.92146160520),
    (0.00000007329, 3.76815551582, 1512.80682400820),
    (0.00000005616, 2.13872867116, 145.63104387150),
    (0.00000005258, 0.30850836910, 36.60037881970),
    (0.00000005688, 1.82274388581, 1227.43444298860),
    (0.00000005658, 2.35049199704, 5.62907429250),
    (0.00000006135, 4.23390561816, 496.01134758170),
    (0.00000005128, 2.89050864873, 313.68355667090),
    (0.00000006472, 3.49494191669, 552.69738935910),
    (0.00000004983, 3.91958511552, 10135.53500222710),
    (0.00000005217, 0.40052635702, 319.31263096340),
    (0.00000004952, 1.42482088612, 49.17873590170),
    (0.00000005964, 5.70758449643, 309.79958751760),
    (0.00000005091, 6.00974510144, 1409.71404978960),
    (0.00000005205, 5.50271334510, 238.90195810360),
    (0.00000004800, 1.13450310670, 134.06407874580),
    (0.00000004943, 1.43051344597, 422.40540518200),
    (0.00000005604, 2.05669305961, 207.36120460480),
    (0.00000006310, 5.22966882627, 139.74133714810),
    (0.00000004772, 3.06668713747, 464.73122651380),
    (0.00000004919, 3.57280542629, 52175.80628314840),
    (0.00000004762, 5.90654311203, 838.96928775040),
    (0.00000004848, 0.77467099227, 1.69692102940),
    (0.00000005694, 0.77313415569, 709.96483432550),
    (0.00000005455, 0.90289242792, 208.84567731310),
    (0.00000004901, 3.79986913631, 15.49911838880),
    (0.00000004772, 0.15755140037, 39.50563376150),
    (0.00000005673, 2.68359159067, 1127.26243007680),
    (0.00000005477, 0.53123497431, 113.87784205160),
    (0.00000005077, 1.59268428609, 1547.97091422940),
    (0.00000004981, 1.44584050478, 1.27202438720),
    (0.00000005813, 5.85024085408, 57.25549074900),
    (0.00000005520, 5.06396698257, 421.22974901440),
    (0.00000005938, 0.96886308551, 6280.10690457480),
    (0.00000005206, 3.58003819370, 474.94684537520),
    (0.00000005256, 0.61005270999, 95.97922721780),
    (0.00000005531, 5.28764137194, 36.76043751410),
    (0.00000006158, 5.73176703797, 711.44930703380),
    (0.00000005003, 2.19048397989, 501.64042187420),
    (0.00000005150, 5.58407480282, 26049.77010593640),
    (0.00000005138, 4.55234158942, 670.91677495100),
    (0.00000005609, 4.37272759780, 52.80207262410),
    (0.00000005636, 2.39183054397, 10210.31660079440),
    (0.00000004512, 2.59978208967, 1234.54798998940),
    (0.00000005412, 4.58813638089, 179.61947792510),
    (0.00000004314, 3.38846714337, 142.66209845490),
    (0.00000004708, 5.23537414423, 3.62333672240),
    (0.00000004471, 3.94378336812, 12566.15169998280),
    (0.00000005296, 1.12249063176, 134.11226285560),
    (0.00000004188, 2.52490407427, 6205.32530600750),
    (0.00000004645, 1.90644271528, 13324.31667116140),
    (0.00000004502, 2.01956920977, 315.16802937920),
    (0.00000005346, 2.94804816223, 353.04043258610),
    (0.00000004177, 2.09489065926, 803.75701341940),
    (0.00000005296, 3.88249567974, 2118.76386037840),
    (0.00000005325, 4.28221258353, 477.91579079180),
    (0.00000005519, 0.09960891963, 600.01914553700),
    (0.00000005169, 0.59948596687, 6.90109867970),
    (0.00000004179, 0.14619703083, 6644.57629047010),
    (0.00000004490, 1.07042724999, 52139.15772021889),
    (0.00000003970, 6.13227798578, 1553.90880506260),
    (0.00000003970, 4.69887237362, 91.78644152380),
    (0.00000004234, 0.14478458924, 65.87476231750),
    (0.00000005183, 3.52837189306, 110.20632121940),
    (0.00000005259, 6.20809827528, 142.71028256470),
    (0.00000003869, 5.25125030487, 1558.05340664680),
    (0.00000004457, 2.10248126544, 487.10451133190),
    (0.00000004890, 1.83606790269, 46.51860702580),
    (0.00000003875, 5.60269278935, 385.49620982160),
    (0.00000003826, 1.30946706974, 2176.61005195840),
    (0.00000004591, 4.84657580441, 1337.64076420800),
    (0.00000005111, 1.18808079775, 981.63138620530),
    (0.00000004709, 1.40878215308, 52213.93931878620),
    (0.00000003891, 5.43661875415, 154.67100656530),
    (0.00000004145, 4.32505910718, 363.51668387840),
    (0.00000004441, 3.50158424570, 187.69623277240),
    (0.00000003703, 2.48768949613, 67.88049988760),
    (0.00000004094, 1.42347047260, 310.71461125430),
    (0.00000003681, 5.70552661143, 491.66980404140),
    (0.00000004787, 3.65822147476, 589.34595228860),
    (0.00000004020, 5.45643059988, 6641.60734505350),
    (0.00000003656, 0.57790726599, 491.44605487220),
    (0.00000004288, 3.35265955957, 203.21660302060),
    (0.00000003843, 4.61508898119, 1025.70231267630),
    (0.00000003767, 0.05292047125, 320.27583880990),
    (0.00000004632, 0.82011276589, 3265.83082813250),
    (0.00000004609, 5.25443775917, 296.15744885260),
    (0.00000004555, 5.30391170376, 26013.12154300690),
    (0.00000003556, 4.80267245336, 224.34479570190),
    (0.00000004859, 5.52756242256, 487.41332787260),
    (0.00000003626, 1.44624342082, 70.84944530420),
    (0.00000004302, 1.60914544159, 12529.50313705330),
    (0.00000003493, 4.75315651083, 12489.88562870720),
    (0.00000003722, 0.27433061822, 949.43624140070),
    (0.00000004234, 5.25112033465, 194.28851491140),
    (0.00000003451, 2.97409317928, 499.63468430410),
    (0.00000004796, 6.21059766333, 491.81856188770),
    (0.00000003639, 1.25605018211, 2603.20824283440),
    (0.00000004646, 5.71392540144, 321.76031151820),
    (0.00000003702, 2.08952561657, 491.03666459500),
    (0.00000003672, 2.87489628704, 497.49582029000),
    (0.00000003965, 1.05484988240, 75.74480641380),
    (0.00000003416, 0.68584132933, 305.08553696180),
    (0.00000004513, 4.38927002490, 425.11371816770),
    (0.00000003853, 0.61321572401, 12526.53419163670),
    (0.00000003788, 3.32221995840, 3140.01275492980),
    (0.00000003781, 5.58125317044, 1652.54816115630),
    (0.00000003903, 5.31609723466, 408.17831118040),
    (0.00000003945, 3.60558877407, 1589.07289528380),
    (0.00000004084, 0.83813879869, 52.36012963940),
    (0.00000004084, 3.50290269471, 23.90594163620),
    (0.00000003694, 1.03218855688, 481.47543703940),
    (0.00000003636, 5.31068934607, 141.48644228730),
    (0.00000003345, 3.94392179077, 20389.92252949249),
    (0.00000004639, 6.24618220184, 821.39499582230),
    (0.00000003934, 0.26992234338, 1655.51710657290),
    (0.00000004431, 2.48647437800, 549.72844394250),
    (0.00000004168, 5.39993754642, 236.50246165860),
    (0.00000004020, 0.07393243012, 52136.18877480229),
    (0.00000004055, 1.34004288978, 1054.92851206430),
    (0.00000003275, 0.98533127454, 1344.75431120880),
    (0.00000003213, 2.97105590703, 20386.95358407589),
    (0.00000004428, 0.06728869735, 491.29729702590),
    (0.00000004063, 0.06192838570, 6168.67674307800),
    (0.00000003804, 5.34897033476, 523.75307426140),
    (0.00000003917, 5.67905809516, 1131.19458333990),
    (0.00000003833, 0.87811168267, 52.69019803950),
    (0.00000004020, 2.69209723289, 1439.46151403940),
    (0.00000004373, 1.86209663434, 73.55775828990),
    (0.00000003159, 1.04693380342, 703.37255218650),
    (0.00000003116, 5.20159166840, 449.23210812500),
    (0.00000003258, 4.65131076542, 696.25900518570),
    (0.00000003427, 0.27003884843, 2389.90914739640),
    (0.00000004349, 0.07531141761, 20426.57109242200),
    (0.00000003383, 5.61838426864, 699.22795060230),
    (0.00000003305, 1.41666877290, 562.14674233010),
    (0.00000003297, 5.46677712589, 1442.21801113490),
    (0.00000003277, 2.71815883511, 980.14691349700),
    (0.00000003171, 4.49510885866, 1439.24906571830),
    (0.00000004175, 4.24327707038, 381.61224066830),
    (0.00000003155, 3.40776789576, 39.72938293070),
    (0.00000004112, 0.90309319273, 1087.69310584050),
    (0.00000003350, 5.27474671017, 80.71948940050),
    (0.00000003725, 1.52448613082, 1058.10990580200),
    (0.00000003650, 3.59798316565, 192.80404220310),
    (0.00000003837, 1.48519528444, 10098.88643929760),
    (0.00000002959, 1.23012121982, 2500.11546861580),
    (0.00000003330, 6.12470287875, 10172.18356515660),
    (0.00000003361, 4.31837298696, 492.07919431860),
    (0.00000003288, 3.14692435376, 347.36317418380),
    (0.00000002992, 5.01304660316, 175.21424391000),
    (0.00000003294, 2.52694043155, 1692.16566950240),
    (0.00000002984, 1.81780659890, 175.11787569040),
    (0.00000003013, 0.92957285991, 1515.77576942480),
    (0.00000003863, 5.46044928570, 332.80601178210),
    (0.00000003403, 1.10932483984, 987.30864460760),
    (0.00000003312, 0.67710158807, 977.48678462110),
    (0.00000003030, 1.77996261146, 156489.28581380738),
    (0.00000003605, 4.89955108152, 1043.88281180040),
    (0.00000002937, 0.60469671230, 990.22940591440),
    (0.00000003276, 4.26765608367, 1189.30140735080),
    (0.00000002966, 5.29808076929, 31.98269648350),
    (0.00000002994, 2.58599359402, 178.08682110700),
    (0.00000003905, 1.87748122254, 1158.28191871380),
    (0.00000003110, 3.09203517638, 235.93301268700),
    (0.00000003313, 2.70308129756, 604.47256366190),
    (0.00000003276, 1.24440460327, 874.65464283340),
    (0.00000003276, 5.58544609667, 950.92071410900),
    (0.00000003746, 0.33859914037, 913.96333463880),
    (0.00000003552, 3.07180917863, 240.38643081190),
    (0.00000002885, 6.01130634957, 1097.51496582700),
    (0.00000003643, 5.11977873355, 452.20105354160),
    (0.00000002768, 4.38396269009, 391.43410065480),
    (0.00000002776, 5.01821594830, 8.90683624980),
    (0.00000002990, 5.62911695857, 140.65636088480),
    (0.00000002761, 4.05534163807, 6283.07584999140),
    (0.00000003226, 4.76711354367, 6241.97386893700),
    (0.00000003748, 4.84009347869, 341.73409989130),
    (0.00000002752, 4.53621078796, 6206.80977871580),
    (0.00000003847, 2.40982343643, 26086.41866886590),
    (0.00000002727, 3.28234198801, 483.48117460950),
    (0.00000002884, 4.05452029151, 1.22384027740),
    (0.00000002702, 3.72061244391, 946.46729598410),
    (0.00000002723, 4.37517047024, 15.19030184810),
    (0.00000002847, 5.22951186538, 661.04673085470),
    (0.00000002680, 4.19379121323, 13.18456427800),
    (0.00000003269, 0.43119778520, 496.97455542820),
    (0.00000003489, 3.82213189319, 625.99451521810),
    (0.00000003757, 3.88223872147, 495.70253104100),
    (0.00000002872, 5.00345974886, 252.08652238160),
    (0.00000003742, 2.03372773652, 8.59801970910),
    (0.00000003172, 1.11135762382, 260.99335863140),
    (0.00000003341, 2.91360557418, 304.23420369990),
    (0.00000002915, 2.63627684599, 6681.22485339960),
    (0.00000002915, 1.43773625890, 6604.95878212400),
    (0.00000002629, 2.09824407450, 2713.41456405380),
    (0.00000002901, 3.33924800230, 515.46387109300),
    (0.00000002803, 1.23584865903, 6643.09181776180),
    (0.00000003045, 3.33515866438, 921.07688163960),
    (0.00000002699, 5.42597794650, 925.26966733360),
    (0.00000002808, 5.77870303237, 1024.21783996800),
    (0.00000003028, 3.75501312393, 511.59540830470),
    (0.00000003090, 2.49453093252, 14.66903698630),
    (0.00000002913, 4.83296711477, 515.93695184500),
    (0.00000003139, 5.99134254710, 570.74476203920),
    (0.00000002752, 3.08268180744, 853.19638175200),
    (0.00000002779, 3.74527347899, 494.00561001160),
    (0.00000002643, 1.99093797444, 470.21728845440),
    (0.00000002763, 4.01095972177, 448.97147569410),
    (0.00000002643, 5.24970673655, 249.94765836750),
    (0.00000003426, 4.73955481174, 1050.99635880120),
    (0.00000002573, 2.01267457287, 1514.29129671650),
    (0.00000002633, 1.63640090603, 170.71264167530),
    (0.00000003034, 4.48979734509, 560.71045373160),
    (0.00000003025, 5.51446170055, 369.45457471160),
    (0.00000003095, 4.01459691667, 1615.89959822680),
    (0.00000002490, 0.15301603966, 78187.44335344699),
    (0.00000002589, 0.79196093766, 1228.91891569690),
    (0.00000003143, 5.33170343283, 1542.34183993690),
    (0.00000003138, 4.50785484172, 461.76228109720),
    (0.00000002812, 3.74246594120, 2.00573757010),
    (0.00000003062, 4.88018345098, 227.96813242430),
    (0.00000002553, 4.85437812287, 488.84961647110),
    (0.00000002971, 1.27359129352, 530.91480537200),
    (0.00000002646, 3.64828423565, 335.77495719870),
    (0.00000003329, 2.71693827722, 171.02145821600),
    (0.00000002648, 0.60243117586, 70.58881287330),
    (0.00000003061, 5.05044834864, 378.64329525170),
    (0.00000002738, 4.75405645015, 151.26011816400),
    (0.00000002728, 5.89052930055, 213.95348674380),
    (0.00000003411, 2.24137878065, 734.45573129830),
    (0.00000002623, 0.54340876464, 1586.10394986720),
    (0.00000003169, 5.84871429991, 1049.51188609290),
    (0.00000002430, 2.34595493263, 450.45594840240),
    (0.00000002907, 5.58085498481, 597.57146498220),
    (0.00000003300, 0.94221473935, 58.17051448570),
    (0.00000002543, 5.30426930256, 419.48464387520),
    (0.00000003175, 2.32600231924, 339.28641933650),
    (0.00000002858, 2.36621678719, 32.50396134530),
    (0.00000002712, 5.79983621237, 1587.58842257550),
    (0.00000003340, 1.36950315448, 384.27236954420),
    (0.00000003301, 5.83023910521, 51.77517430280),
    (0.00000002415, 0.69446923670, 489.55219188670),
    (0.00000002736, 5.74320864965, 1167.84314626940),
    (0.00000002956, 5.22962139507, 199.85389872910),
    (0.00000003262, 0.01501002027, 1545.31078535350),
    (0.00000002506, 4.84043333582, 943.49835056750),
    (0.00000003240, 2.46676155925, 1016.79547642650),
    (0.00000003148, 4.62079057738, 233.53351624200),
    (0.00000002327, 4.10421417326, 70.11573212130),
    (0.00000002371, 4.79963943424, 271.14528701800),
    (0.00000003006, 3.66877796077, 1476.15826107870),
    (0.00000002537, 5.66681769885, 21.14944454070),
    (0.00000003006, 0.93048909480, 21.97952594320),
    (0.00000003033, 0.67157488690, 292.48592802040),
    (0.00000002344, 1.83547256266, 492.30868898220),
    (0.00000003117, 2.76268894894, 1473.18931566210),
    (0.00000002323, 2.88799980853, 533.62311835770),
    (0.00000002340, 4.44862573253, 490.80716993140),
    (0.00000002511, 0.99467349084, 266.10116806210),
    (0.00000002919, 4.75889516601, 1511.32235129990),
    (0.00000002493, 6.10541658597, 1225.94997028030),
    (0.00000002798, 3.06162629894, 419.74527630610),
    (0.00000002691, 3.20679023131, 463.50738623640),
    (0.00000002291, 5.81534758547, 246.97871295090),
    (0.00000002319, 6.05514281470, 525.75881183150),
    (0.00000003112, 0.89712836583, 314.90739694830),
    (0.00000003085, 5.84605938859, 1192.22216865760),
    (0.00000002897, 0.54747024257, 20350.30502114640),
    (0.00000003067, 2.22206306288, 248.46318565920),
    (0.00000002252, 0.87483094907, 61.02758531770),
    (0.00000002392, 3.62837597194, 439.19779981740),
    (0.00000002817, 2.73562306571, 16.67477455640),
    (0.00000002379, 6.17876088396, 467.65198782060),
    (0.00000002598, 4.82643304253, 384.58118608490),
    (0.00000002718, 1.01823841209, 215.95922431390),
    (0.00000002998, 1.09755715300, 1964.74724511890),
    (0.00000002884, 2.97813466834, 383.09671337660),
    (0.00000002231, 4.48841493844, 4.14460158420),
    (0.00000002203, 2.23336308907, 481.26298871830),
    (0.00000002260, 2.35404913660, 659.61044225620),
    (0.00000002491, 1.70236357070, 445.34813897170),
    (0.00000003041, 5.55577674116, 674.80074410430),
    (0.00000002289, 1.18497528002, 1552.42433235430),
    (0.00000002975, 0.48272389481, 1052.48083150950),
    (0.00000002339, 0.75318738767, 478.81530816350),
    (0.00000003011, 0.16359500858, 54.28654533240),
    (0.00000002820, 6.18522693724, 556.51766803760),
    (0.00000002266, 5.91286000054, 3.49021027840),
    (0.00000002231, 1.45038594906, 196.50670080260),
)

R1 = (
    (0.00236338502, 0.70498011235, 38.13303563780),
    (0.00013220279, 3.32015499895, 1.48447270830),
    (0.00008621863, 6.21628951630, 35.16409022120),
    (0.00002701740, 1.88140666779, 39.61750834610),
    (0.00002153150, 5.16873840979, 76.26607127560),
    (0.00002154735, 2.09431198086, 2.96894541660),
    (0.00001463924, 1.18417031047, 33.67961751290),
    (0.00001603165, 0.00000000000, 0.00000000000),
    (0.00001135773, 3.91891199655, 36.64856292950),
    (0.00000897650, 5.24122933533, 388.46515523820),
    (0.00000789908, 0.53315484580, 168.05251279940),
    (0.00000760030, 0.02051033644, 182.27960680100),
    (0.00000607183, 1.07706500350, 1021.24889455140),
    (0.00000571622, 3.40060785432, 484.44438245600),
    (0.00000560790, 2.88685815667, 498.67147645760),
    (0.00000490190, 3.46830928696, 137.03302416240),
    (0.00000264093, 0.86220057976, 4.45341812490),
    (0.00000270526, 3.27355867939, 71.81265315070),
    (0.00000203524, 2.41820674409, 32.19514480460),
    (0.00000155438, 0.36537064534, 41.10198105440),
    (0.00000132766, 3.60157672619, 9.56122755560),
    (0.00000093626, 0.66670888163, 46.20979048510),
    (0.00000083317, 3.25992461673, 98.89998852460),
    (0.00000072205, 4.47717435693, 601.76425067620),
    (0.00000068983, 1.46326969479, 74.78159856730),
    (0.00000086953, 5.77228651853, 381.35160823740),
    (0.00000068717, 4.52563942435, 70.32818044240),
    (0.00000064724, 3.85477388838, 73.29712585900),
    (0.00000068377, 3.39509945953, 108.46121608020),
    (0.00000053375, 5.43650770516, 395.57870223900),
    (0.00000044453, 3.61409723545, 2.44768055480),
    (0.00000041243, 4.73866592865, 8.07675484730),
    (0.00000048331, 1.98568593981, 175.16605980020),
    (0.00000041744, 4.94257598763, 31.01948863700),
    (0.00000044102, 1.41744904844, 1550.93985964600),
    (0.00000041170, 1.41999374753, 490.07345674850),
    (0.00000041099, 4.86312637841, 493.04240216510),
    (0.00000036267, 5.30764043577, 312.19908396260),
    (0.00000036284, 0.38187812797, 77.75054398390),
    (0.00000040619, 2.27237172464, 529.69096509460),
    (0.00000032360, 5.91123007786, 5.93789083320),
    (0.00000031197, 2.70549944134, 1014.13534755060),
    (0.00000032730, 5.22147683115, 41.05379694460),
    (0.00000036079, 4.87817494829, 491.55792945680),
    (0.00000030181, 3.63273193845, 30.71067209630),
    (0.00000029991, 3.30769367603, 1028.36244155220),
    (0.00000027048, 1.77647060739, 44.72531777680),
    (0.00000027756, 4.55583165091, 7.11354700080),
    (0.00000027475, 0.97228280623, 33.94024994380),
    (0.00000024944, 3.10083391185, 144.14657116320),
    (0.00000025958, 2.99724758632, 60.76695288680),
    (0.00000021369, 4.71270048898, 278.25883401880),
    (0.00000021283, 0.68957829113, 251.43213107580),
    (0.00000023727, 5.12044184469, 176.65053250850),
    (0.00000021392, 0.86286397645, 4.19278569400),
    (0.00000023373, 1.64955088447, 173.68158709190),
    (0.00000024163, 3.56602004577, 145.10977900970),
    (0.00000020238, 5.61479765982, 24.11838995730),
    (0.00000026958, 4.14294870704, 453.42489381900),
    (0.00000024048, 1.00718363213, 213.29909543800),
    (0.00000018322, 1.98028683488, 72.07328558160),
    (0.00000018266, 6.17260374467, 189.39315380180),
    (0.00000019201, 4.65162168927, 106.97674337190),
    (0.00000017606, 1.60307551767, 62.25142559510),
    (0.00000016545, 1.69931816587, 357.44566660120),
    (0.00000020132, 3.29520553529, 114.39910691340),
    (0.00000015425, 4.38812302799, 25.60286266560),
    (0.00000019173, 2.20014267311, 343.21857259960),
    (0.00000015077, 3.66802659382, 0.52126486180),
    (0.00000014029, 0.55336333290, 129.91947716160),
    (0.00000013361, 5.85751083720, 68.84370773410),
    (0.00000015357, 4.20731277007, 567.82400073240),
    (0.00000012746, 3.52815836608, 477.33083545520),
    (0.00000011724, 5.57647263460, 31.23193695810),
    (0.00000011533, 0.89138506506, 594.65070367540),
    (0.00000010508, 4.35552732772, 32.71640966640),
    (0.00000010826, 5.21826226871, 26.82670294300),
    (0.00000010085, 1.98102855874, 40.58071619260),
    (0.00000010518, 5.27281360238, 2.92076130680),
    (0.00000009207, 0.50092534158, 64.95973858080),
    (0.00000009231, 0.68180977710, 160.93896579860),
    (0.00000008735, 5.80657503476, 6.59228213900),
    (0.00000010114, 4.51164596694, 28.57180808220),
    (0.00000010392, 5.18877536013, 42.58645376270),
    (0.00000009873, 3.76512158080, 181.75834193920),
    (0.00000008350, 2.82449631025, 43.24084506850),
    (0.00000009838, 1.49438763600, 47.69426319340),
    (0.00000007645, 4.07503370297, 389.94962794650),
    (0.00000008004, 2.78082277326, 505.78502345840),
    (0.00000007440, 2.35731983047, 11.04570026390),
    (0.00000007342, 1.62279119952, 135.54855145410),
    (0.00000009450, 0.27241261915, 426.59819087600),
    (0.00000007192, 0.82841201068, 911.04257333200),
    (0.00000006979, 1.86753914872, 206.18554843720),
    (0.00000006874, 0.83802906828, 82.85835341460),
    (0.00000007897, 1.86554246391, 38.65430049960),
    (0.00000006729, 3.98338053636, 12.53017297220),
    (0.00000006357, 0.90093123522, 487.36514376280),
    (0.00000006720, 1.33936040700, 220.41264243880),
    (0.00000007695, 5.13312500855, 23.90594163620),
    (0.00000007059, 5.99832463494, 639.89728631400),
    (0.00000008302, 3.85960902325, 37.61177077600),
    (0.00000006412, 2.41743702679, 1059.38193018920),
    (0.00000006751, 1.96860894470, 45.24658263860),
    (0.00000006431, 4.07813226506, 35.68535508300),
    (0.00000005517, 3.81325790890, 815.06334611420),
    (0.00000005562, 0.41619602150, 563.63121503840),
    (0.00000006115, 2.10934525342, 697.74347789400),
    (0.00000006216, 4.79301628209, 143.62530630140),
    (0.00000005346, 3.13071964722, 386.98068252990),
    (0.00000005245, 6.06245070403, 171.23390653710),
    (0.00000005129, 0.79394555531, 179.09821306330),
    (0.00000005168, 4.73765992885, 522.57741809380),
    (0.00000006422, 0.64684316894, 350.33211960040),
    (0.00000005006, 2.37645082899, 77.22927912210),
    (0.00000005005, 4.70632786971, 460.53844081980),
    (0.00000005167, 5.20246616570, 446.31134681820),
    (0.00000005119, 2.17338058771, 494.73932319450),
    (0.00000005025, 4.21265519856, 536.80451209540),
    (0.00000004722, 6.22814313946, 63.73589830340),
    (0.00000005125, 5.38138329172, 179.31066138440),
    (0.00000004918, 4.09031782903, 488.37653571910),
    (0.00000004652, 5.10765073368, 274.06604832480),
    (0.00000004711, 5.56542374115, 42.32582133180),
    (0.00000004459, 1.30784829830, 69.36497259590),
    (0.00000005485, 3.88088464259, 218.40690486870),
    (0.00000004416, 3.05353893868, 27.08733537390),
    (0.00000004559, 4.92224120952, 285.37238101960),
    (0.00000004393, 4.18047835584, 5.41662597140),
    (0.00000004687, 2.21401153210, 1029.84691426050),
    (0.00000004644, 1.87902594973, 1433.61999142580),
    (0.00000005639, 3.05596737234, 983.11585891360),
    (0.00000006045, 5.68817982786, 351.81659230870),
    (0.00000004430, 3.37768805833, 377.41945497430),
    (0.00000004683, 2.14346624864, 97.41551581630),
    (0.00000005845, 4.62301099402, 1024.21783996800),
    (0.00000004536, 2.45860473853, 496.01134758170),
    (0.00000004398, 5.65312496227, 3.93215326310),
    (0.00000004287, 0.66340266603, 1012.65087484230),
    (0.00000004086, 0.14551174994, 385.28376150050),
    (0.00000004029, 5.98399329775, 178.34745353790),
    (0.00000004276, 3.68205082970, 348.84764689210),
    (0.00000005257, 3.75263242432, 379.86713552910),
    (0.00000004012, 0.42559540783, 104313.47953065898),
    (0.00000004025, 2.40645188238, 84.34282612290),
    (0.00000003957, 0.86846121055, 171.98466606250),
    (0.00000003961, 3.04953080906, 1017.31674128830),
    (0.00000005559, 0.77714806229, 1447.84708542740),
    (0.00000005071, 2.61075526868, 1536.71276564440),
    (0.00000004052, 5.00014006312, 391.64654897590),
    (0.00000005182, 4.73444634983, 382.83608094570),
    (0.00000003763, 4.29449373755, 313.68355667090),
    (0.00000004038, 2.82857942788, 1661.14618086540),
    (0.00000004067, 5.73169928960, 169.53698550770),
    (0.00000003841, 1.62580928420, 0.96320784650),
    (0.00000003901, 2.70874386576, 14.01464568050),
    (0.00000003721, 1.20062375429, 1026.87796884390),
    (0.00000003911, 3.01809123569, 100.38446123290),
    (0.00000003489, 4.28865448963, 1025.18104781450),
    (0.00000003714, 5.05021268365, 292.48592802040),
    (0.00000003816, 3.93084933114, 39.09624348430),
    (0.00000003988, 2.82832650224, 134.11226285560),
    (0.00000003745, 4.24728135115, 180.79513409270),
    (0.00000003836, 1.02685786071, 1018.27994913480),
    (0.00000003941, 5.21895739331, 183.76407950930),
    (0.00000004669, 4.38080962573, 1066.49547719000),
    (0.00000003780, 6.03723468132, 1022.73336725970),
    (0.00000003647, 3.98130320367, 608.87779767700),
    (0.00000003456, 5.54052355058, 846.08283475120),
    (0.00000004047, 3.71041480907, 1018.06750081370),
    (0.00000003865, 4.76002199091, 166.56804009110),
    (0.00000003629, 3.29053233846, 447.79581952650),
    (0.00000003564, 4.36703678321, 397.06317494730),
    (0.00000003304, 1.49289552229, 1505.69327700740),
    (0.00000003976, 2.42476188945, 106.01353552540),
    (0.00000004217, 4.21677652639, 1052.26838318840),
    (0.00000003294, 0.42088065654, 22.63391724900),
    (0.00000003615, 3.68096122231, 494.52687487340),
    (0.00000003230, 5.10786091356, 69.15252427480),
    (0.00000003280, 3.62226152032, 531.17543780290),
    (0.00000003337, 2.72502876320, 481.47543703940),
    (0.00000003187, 0.08677634706, 399.51085550210),
    (0.00000003389, 1.79454271219, 1519.92037100900),
    (0.00000003179, 3.40418030121, 423.62924545940),
    (0.00000003154, 3.69356460843, 470.21728845440),
    (0.00000003706, 2.79048710497, 462.02291352810),
    (0.00000003136, 4.38015969606, 385.49620982160),
    (0.00000003122, 0.48346644637, 79.18683258240),
    (0.00000003392, 0.48037804731, 521.09294538550),
    (0.00000003465, 0.93152295589, 2183.72359895920),
    (0.00000003735, 0.98809808606, 487.41332787260),
    (0.00000003998, 3.38773325131, 6283.07584999140),
    (0.00000002998, 2.61728063127, 487.62577619370),
    (0.00000003295, 2.53821501556, 4.66586644600),
    (0.00000002964, 3.66274645375, 495.49008271990),
    (0.00000003901, 1.65463523144, 210.33015002140),
    (0.00000002950, 1.99904237956, 872.90953769420),
    (0.00000002948, 2.90769224206, 391.43410065480),
    (0.00000002971, 0.31626092637, 5.10780943070),
    (0.00000003085, 0.95725590904, 109.94568878850),
    (0.00000002995, 3.34433305798, 394.09422953070),
    (0.00000003126, 5.89472116854, 105.49227066360),
    (0.00000003904, 3.01022809543, 556.51766803760),
    (0.00000003388, 6.24936444215, 535.32003938710),
    (0.00000002930, 6.15005257333, 164.12035953630),
    (0.00000003267, 4.19718045293, 518.38463239980),
    (0.00000003946, 2.88842759670, 151.26011816400),
    (0.00000003076, 6.04134449219, 142.14083359310),
    (0.00000002823, 0.60712626756, 214.78356814630),
    (0.00000002917, 2.74502617182, 138.51749687070),
    (0.00000003347, 6.09373507569, 6246.42728706190),
    (0.00000003659, 5.12211619716, 79.23501669220),
    (0.00000003010, 0.24656411754, 91.78644152380),
    (0.00000002861, 6.17465663902, 422.40540518200),
    (0.00000002989, 2.31620917965, 485.92885516430),
    (0.00000003088, 2.29186342974, 110.20632121940),
    (0.00000003030, 3.69866149100, 532.61172640140),
    (0.00000003020, 2.36422658177, 290.21955801940),
    (0.00000003170, 1.23078934548, 10176.63698328150),
    (0.00000002652, 3.35836234807, 148.07872442630),
    (0.00000002673, 6.03366372927, 196.50670080260),
    (0.00000002630, 0.46957619348, 1970.42450352120),
    (0.00000002599, 4.86022081674, 439.19779981740),
    (0.00000002878, 2.61946597178, 488.58898404020),
    (0.00000002720, 1.71836225398, 364.55921360200),
    (0.00000003333, 3.25126857354, 30.05628079050),
    (0.00000003053, 2.49346960035, 6243.45834164530),
    (0.00000003062, 6.23776299963, 419.48464387520),
    (0.00000002786, 0.83078219939, 497.18700374930),
    (0.00000002834, 3.52926079424, 457.87831194390),
    (0.00000002932, 1.80245810977, 500.15594916590),
    (0.00000003030, 5.10152500393, 367.97010200330),
    (0.00000002956, 5.76230870725, 986.08480433020),
    (0.00000003116, 2.20042242739, 495.70253104100),
    (0.00000002554, 0.65945973992, 67.35923502580),
    (0.00000002901, 3.91891656185, 10173.66803786490),
    (0.00000002840, 1.34453183591, 482.95990974770),
    (0.00000002458, 1.20012815574, 489.11024890200),
    (0.00000002556, 3.86921927085, 487.10451133190),
    (0.00000002614, 1.51881085312, 463.50738623640),
    (0.00000002386, 4.58400538443, 615.99134467780),
    (0.00000002438, 5.19827220476, 501.11915701240),
    (0.00000002537, 1.64802783144, 519.60847267720),
    (0.00000002444, 3.87859489652, 185.24855221760),
    (0.00000002795, 4.04265752580, 255.05546779820),
    (0.00000002895, 3.26202698812, 1646.91908686380),
    (0.00000002225, 5.75197574692, 605.95703637020),
    (0.00000002324, 3.99503920129, 481.26298871830),
    (0.00000002962, 1.74151265966, 2080.63082474060),
    (0.00000002621, 1.74442251671, 35.21227433100),
)

R2 = (
    (0.00004247412, 5.89910679117, 38.13303563780),
    (0.00000217570, 0.34581829080, 1.48447270830),
    (0.00000163025, 2.23872947130, 168.05251279940),
    (0.00000156285, 4.59414467342, 182.27960680100),
    (0.00000117940, 5.10295026024, 484.44438245600),
    (0.00000112429, 1.19000583596, 498.67147645760),
    (0.00000127141, 2.84786298079, 35.16409022120),
    (0.00000099467, 3.41578558739, 175.16605980020),
    (0.00000064814, 3.46214064840, 388.46515523820),
    (0.00000077286, 0.01659281785, 491.55792945680),
    (0.00000049509, 4.06995509133, 76.26607127560),
    (0.00000039330, 6.09521855958, 1021.24889455140),
    (0.00000036450, 5.17130059988, 137.03302416240),
    (0.00000037080, 5.97288967681, 2.96894541660),
    (0.00000030484, 3.58259801313, 33.67961751290),
    (0.00000021099, 0.76843555176, 36.64856292950),
    (0.00000013886, 3.59248623971, 395.57870223900),
    (0.00000013117, 5.09263515697, 98.89998852460),
    (0.00000011379, 1.18060018898, 381.35160823740),
    (0.00000009132, 2.34787658568, 601.76425067620),
    (0.00000008527, 5.25134685897, 2.44768055480),
    (0.00000008136, 4.96270726986, 4.45341812490),
    (0.00000007417, 4.46775409796, 189.39315380180),
    (0.00000007225, 1.92287508629, 9.56122755560),
    (0.00000007289, 1.65519525780, 1028.36244155220),
    (0.00000008076, 5.84268048311, 220.41264243880),
    (0.00000009654, 0.00000000000, 0.00000000000),
    (0.00000006554, 0.69397520733, 144.14657116320),
    (0.00000007782, 1.14341656235, 1059.38193018920),
    (0.00000005665, 6.25378258571, 74.78159856730),
    (0.00000005628, 5.23383764266, 46.20979048510),
    (0.00000005523, 4.59041448911, 1014.13534755060),
    (0.00000005177, 5.23116646157, 477.33083545520),
    (0.00000005503, 3.49522319102, 183.76407950930),
    (0.00000004878, 3.52934357721, 39.61750834610),
    (0.00000004787, 2.08260524745, 41.10198105440),
    (0.00000005055, 0.19949888617, 166.56804009110),
    (0.00000004751, 1.18054948270, 169.53698550770),
    (0.00000004747, 1.50608965076, 73.29712585900),
    (0.00000006113, 6.18326155595, 71.81265315070),
    (0.00000004606, 3.91970908886, 587.53715667460),
    (0.00000005756, 2.23667359233, 176.65053250850),
    (0.00000004536, 2.84337336954, 7.11354700080),
    (0.00000004338, 0.51553847388, 446.31134681820),
    (0.00000003891, 0.26338839265, 1550.93985964600),
    (0.00000004465, 3.01487041298, 129.91947716160),
    (0.00000003727, 2.37977930658, 160.93896579860),
    (0.00000003840, 3.79290381880, 111.43016149680),
    (0.00000004142, 1.70293820961, 983.11585891360),
    (0.00000003296, 1.07748822909, 505.78502345840),
    (0.00000004008, 0.30663868827, 494.73932319450),
    (0.00000003974, 5.97351783840, 488.37653571910),
    (0.00000003925, 4.85736421123, 60.76695288680),
    (0.00000002966, 2.01608546009, 822.17689311500),
    (0.00000003972, 1.07780371834, 374.23806123660),
    (0.00000003843, 5.23002047199, 350.33211960040),
    (0.00000002848, 6.17799253802, 704.85702489480),
    (0.00000003527, 0.79317138165, 274.06604832480),
    (0.00000002828, 1.32275775835, 386.98068252990),
    (0.00000002773, 5.37132330836, 251.43213107580),
    (0.00000003113, 5.12622288690, 426.59819087600),
    (0.00000003344, 5.61433537548, 1124.34166877000),
    (0.00000002597, 0.67759426519, 312.19908396260),
    (0.00000002581, 3.55847612121, 567.82400073240),
    (0.00000002578, 1.45603792456, 1035.47598855300),
    (0.00000002541, 5.19427579702, 1227.43444298860),
    (0.00000002510, 4.12148891512, 171.23390653710),
    (0.00000002511, 2.71606957319, 179.09821306330),
    (0.00000002342, 0.96469916587, 1019.76442184310),
    (0.00000002500, 0.70282276030, 707.77778620160),
    (0.00000002480, 4.59623030219, 693.55069220000),
    (0.00000002253, 0.74334306011, 976.00231191280),
)

R3 = (
    (0.00000166297, 4.55243893489, 38.13303563780),
    (0.00000022380, 3.94830879358, 168.05251279940),
    (0.00000021348, 2.86296778794, 182.27960680100),
    (0.00000016233, 0.54226725872, 484.44438245600),
    (0.00000015623, 5.75702251906, 498.67147645760),
    (0.00000011867, 4.40280192710, 1.48447270830),
    (0.00000006448, 5.19003066847, 31.01948863700),
    (0.00000003655, 5.91335292846, 1007.02180054980),
    (0.00000003681, 1.62865545676, 388.46515523820),
    (0.00000003198, 0.70197118575, 1558.05340664680),
    (0.00000003243, 1.88035665980, 522.57741809380),
    (0.00000003269, 2.94301808574, 76.26607127560),
    (0.00000002688, 1.87062743473, 402.69224923980),
    (0.00000003246, 0.79381356193, 536.80451209540),
    (0.00000002650, 5.76858449026, 343.21857259960),
    (0.00000002644, 4.64542905401, 500.15594916590),
    (0.00000002541, 4.79217120822, 482.95990974770),
    (0.00000002523, 1.72869889780, 395.57870223900),
    (0.00000002690, 2.21096415618, 446.31134681820),
    (0.00000002355, 5.77381398401, 485.92885516430),
    (0.00000002874, 6.19643340540, 815.06334611420),
    (0.00000002278, 3.66579603119, 497.18700374930),
)
# fmt: on

L = (L0, L1, L2, L3, L4, L5)
B = (B0, B1, B2, B3, B4, B5)
R = (R0, R1, R2, R3)
